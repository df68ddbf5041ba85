from collections import namedtuple
import logging

from .util import (RPNError, InvalidToken, IncompleteExpression,
                   UnknownOperator, format_number)
from .operators import OPERATORS
from .lexer import Lexer, NUMBER, OPERATOR
from .stack import OperandStack
from .history import History


logger = logging.getLogger(__name__)


class Evaluation(namedtuple('Evaluation', 'value error')):
    '''
    Outcome of evaluating one expression: a value, or the RPNError why not.
    '''
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        '''
        Return the value, or raise the error.
        '''
        if self.error is not None:
            raise self.error
        return self.value


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Owns its operand stack and history; machines share nothing, so any
    number of them can be used side by side.
    '''

    OPERATORS = OPERATORS
    DEFAULT_PRECISION = None

    def __init__(self, precision=None):
        '''
        Create machine with an empty stack and history.

        :param precision: Decimal places to round to when formatting results.
        '''
        self.stack = OperandStack()
        self.history = History()
        self.lexer = Lexer()
        self.precision = (type(self).DEFAULT_PRECISION
                          if precision is None
                          else int(precision))

    def evaluate(self, expression):
        '''
        Evaluate a whole expression from an empty stack.

        Never raises RPNError; returns it in the Evaluation instead. Only
        successful evaluations are recorded in history.
        '''
        self.stack.clear()
        try:
            for token in self.lexer.lex(expression):
                self.feed(token)
            if self.stack.size() != 1:
                raise IncompleteExpression(self.stack.size())
            result = self.stack.pop()
        except RPNError as e:
            logger.debug('%r failed: %s', expression, e)
            return Evaluation(None, e)
        self.history.append(expression, result)
        logger.debug('%r = %r', expression, result)
        return Evaluation(result, None)

    def batch(self, expressions):
        '''
        Evaluate each expression independently.

        Yields (index, expression, Evaluation), index from 1. One failure
        doesn't stop the rest.
        '''
        for index, expression in enumerate(expressions, start=1):
            yield index, expression, self.evaluate(expression)

    def feed(self, token):
        '''
        Stack or run a token on the machine.
        '''
        if token.kind == NUMBER:
            self.stack.push(token.value)
        elif token.kind == OPERATOR:
            self._apply(token.text)
        else:
            raise InvalidToken(token.text)

    def _apply(self, name):
        '''
        Apply operator to stack, popping its arguments and pushing its result.
        '''
        try:
            op = type(self).OPERATORS[name]
        except KeyError:
            raise UnknownOperator(name) from None
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        args = reversed(self.stack.popmany(op.arity, operator=name))
        self.stack.push(op.function(*args))

    def stack_snapshot(self):
        '''
        Return the stack, bottom first.
        '''
        return self.stack.snapshot()

    def clear_stack(self):
        self.stack.clear()

    def history_entries(self):
        '''
        Return history as a list of (index, expression, result).
        '''
        return list(self.history.entries())

    def clear_history(self):
        self.history.clear()

    def format(self, value):
        '''
        Format value according to machine settings.
        '''
        return format_number(value, self.precision)
