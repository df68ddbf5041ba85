from collections import namedtuple
from functools import reduce
import operator

import regex

from .operators import OPERATORS


NUMBER = 'number'
OPERATOR = 'operator'
INVALID = 'invalid'

Token = namedtuple('Token', 'kind text value')


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Lexemes are whitespace separated; each is classified on its own. For
    consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Number: optional sign, at least one digit, at most one decimal point.
    NUMBER = r'''
              -?
              (?:
                  # 1, 12, 1. (notice trailing dot), 1.3
                  [0-9]+
                  (?:
                      \.
                      [0-9]*
                  )?
              )|(?:
                  # .2, -.2, but not . alone
                  -?
                  \.
                  [0-9]+
              )
              '''
    # Sorted, so the printed grammar doesn't change between runs.
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape,
                                      sorted(OPERATORS,
                                             key=len,
                                             reverse=True))) + r')'
    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield a Token for every whitespace separated lexeme.

        Bad lexemes are yielded as INVALID tokens rather than raised, so the
        caller decides when to stop.
        '''
        for text in line.split():
            yield self.classify(text)

    def classify(self, text):
        '''
        Return the Token for a single lexeme.
        '''
        match = regex.fullmatch(type(self).LEXEME, text,
                                flags=type(self).FLAGS)
        if match is None:
            return Token(INVALID, text, None)
        groups = self.matchedgroups(match)
        if NUMBER in groups:
            return Token(NUMBER, text, float(text))
        return Token(OPERATOR, text, None)

    def matchedgroups(self, match):
        '''
        Return the named groups a lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
