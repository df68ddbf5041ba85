'''
Operators of the calculator, and the domain checks that go with them.

Binary operators get their operands in stack order: "a b -" is a - b.
'''

from collections import namedtuple
import operator
import math

from .util import (DivisionByZero, NegativeSquareRoot, TangentUndefined,
                   InvalidFibonacciArg, InvalidPascalArgs)


Operator = namedtuple('Operator', 'name arity function')


def _unary(name, f):
    return name, Operator(name, 1, f)


def _binary(name, f):
    return name, Operator(name, 2, f)


def divide(a, b):
    if b == 0:
        raise DivisionByZero()
    return a / b


def square_root(a):
    if a < 0:
        raise NegativeSquareRoot()
    return math.sqrt(a)


def _is_odd_integer(n):
    return n.is_integer() and n % 2 == 1


def power(a, b):
    '''
    a to the b, with C pow()'s results where Python would raise instead.

    Overflow is ±inf, 0 to a negative power is inf, and a negative base to a
    fractional power is nan.
    '''
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0:
            if _is_odd_integer(b):
                return math.copysign(math.inf, a)
            return math.inf
        return math.nan


def _radians(degrees):
    return degrees * math.pi / 180.0


def sine(a):
    radians = _radians(a)
    if not math.isfinite(radians):
        return math.nan
    return math.sin(radians)


def cosine(a):
    radians = _radians(a)
    if not math.isfinite(radians):
        return math.nan
    return math.cos(radians)


def tangent(a):
    radians = _radians(a)
    if not math.isfinite(radians):
        return math.nan
    # Exact comparison; cos(pi/2) is ~6e-17 in floating point, not 0.
    if math.cos(radians) == 0:
        raise TangentUndefined()
    return math.tan(radians)


def fibonacci(n):
    '''
    nth Fibonacci number, fib(0) = 0, fib(1) = 1.

    Accumulates in floats, so it goes inexact past fib(78) and inf past
    fib(1476), rather than growing into a big integer.
    '''
    if not n.is_integer() or n < 0:
        raise InvalidFibonacciArg(n)
    a, b = 0.0, 1.0
    for _ in range(int(n)):
        a, b = b, a + b
    return a


def pascal(row, col):
    '''
    Entry col of row in Pascal's triangle, i.e. C(row, col).

    Multiplicative formula, so no intermediate factorials.
    '''
    if not (row.is_integer() and col.is_integer()) or \
       row < 0 or col < 0 or col > row:
        raise InvalidPascalArgs(row, col)
    result = 1.0
    for i in range(1, int(col) + 1):
        result = result * (row - i + 1) / i
    return result


OPERATORS = dict([
    # Arithmetic
    _binary('+', operator.__add__),
    _binary('-', operator.__sub__),
    _binary('*', operator.__mul__),
    _binary('/', divide),
    _binary('^', power),
    _unary('sqrt', square_root),

    # Trigonometric, in degrees
    _unary('sin', sine),
    _unary('cos', cosine),
    _unary('tan', tangent),

    # Combinatorial
    _unary('fib', fibonacci),
    _binary('pascal', pascal),
])
