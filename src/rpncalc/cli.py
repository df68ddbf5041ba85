from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .util import RPNError, wrap_user_errors
from .machine import Machine
from .lexer import Lexer, OPERATOR


logger = logging.getLogger(__name__)


HELP = '''\
operators:
  + - * /        arithmetic
  ^              power
  sqrt           square root
  sin cos tan    trigonometry, in degrees
  fib            Fibonacci number (n fib)
  pascal         Pascal's triangle entry (row col pascal)
commands:
  stack          show the stack
  clear          clear the stack
  history        show evaluated expressions
  clearhistory   clear the history
  batch          evaluate several expressions, one per line, until empty line
  help           show this help
  q, quit        quit
examples:
  5 5 +          10
  2 3 ^          8
  9 sqrt         3
  5 fib          5
  4 2 pascal     6'''


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # Recall within this run only.
                                    history=InMemoryHistory(),
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump every token's kind, text, and arity.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(text)>\t<arity>')
        for line in self.args.expressions:
            for token in lexer.lex(line):
                arity = None
                if token.kind == OPERATOR:
                    arity = Machine.OPERATORS[token.text].arity
                print(token.kind, repr(token.text), arity, sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator) on every line of input.
        '''
        machine = Machine(precision=self.args.precision)
        lines = iter(self.args.expressions)
        for line in lines:
            line = line.strip()
            if not line:
                continue
            command = type(self).COMMANDS.get(line)
            try:
                if command is None:
                    self.evaluate(machine, line)
                elif command(self, machine, lines):
                    break
            # Abort this line only, keep reading
            except RPNError as e:
                print(e.args[0], file=stderr)

    @wrap_user_errors('Cannot evaluate {2!r}')
    def evaluate(self, machine, expression):
        result, error = machine.evaluate(expression)
        if error is None:
            print('result:', machine.format(result))
        else:
            print(error.args[0], file=stderr)

    def printhelp(self, machine, lines):
        print(HELP)

    def printstack(self, machine, lines):
        snapshot = machine.stack_snapshot()
        if not snapshot:
            print('stack: [empty]')
        else:
            print('stack:', *map(machine.format, snapshot))

    def clrstack(self, machine, lines):
        machine.clear_stack()
        print('stack cleared')

    def printhistory(self, machine, lines):
        if not len(machine.history):
            print('history: [empty]')
            return
        print('history:')
        print(*machine.history.format(machine.precision), sep='\n')

    def clrhistory(self, machine, lines):
        machine.clear_history()
        print('history cleared')

    @wrap_user_errors('Batch failed')
    def batch(self, machine, lines):
        '''
        Collect expressions until an empty line, then evaluate each on its own.
        '''
        if self._interactive():
            print('batch mode, empty line to finish:')
        expressions = []
        for line in lines:
            line = line.strip()
            if not line:
                break
            expressions.append(line)
        logger.debug('batch of %d expression(s)', len(expressions))
        for index, expression, (result, error) in machine.batch(expressions):
            if error is None:
                print('expression {}: {} = {}'.format(
                    index, expression, machine.format(result)))
            else:
                print('expression {} error: {}'.format(index, error.args[0]))

    def quit(self, machine, lines):
        return True

    COMMANDS = {
        'help': printhelp,
        'stack': printstack,
        'clear': clrstack,
        'history': printhistory,
        'clearhistory': clrhistory,
        'batch': batch,
        'q': quit,
        'quit': quit,
    }

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          default=Machine.DEFAULT_PRECISION,
                                          help='decimal places to round '
                                               'results to')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
