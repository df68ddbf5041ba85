'''
RPN calculator.

Evaluates postfix arithmetic expressions against an operand stack:
arithmetic, square root, power, trigonometry in degrees, Fibonacci numbers,
and Pascal's triangle entries. Successful evaluations are kept in a history.

Every Machine owns its own stack and history, and every evaluate() starts from
an empty stack, so a batch of expressions can't leak into each other.

    >>> machine = Machine()
    >>> machine.evaluate('5 5 + 3 *').value
    30.0
    >>> machine.evaluate('4 0 /').error
    DivisionByZero('Division by zero')
'''

from .cli import CLI
from .lexer import Lexer, Token
from .machine import Machine, Evaluation
from .stack import OperandStack
from .history import History, HistoryEntry
from .util import RPNError


__all__ = ('Machine', 'Evaluation', 'Lexer', 'Token', 'OperandStack',
           'History', 'HistoryEntry', 'RPNError', 'CLI')
