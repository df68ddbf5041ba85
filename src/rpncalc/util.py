from functools import wraps
import math


class RPNError(Exception):
    '''
    Base of every error a user can provoke by evaluating an expression.

    Message is args[0], so callers just print that.
    '''
    pass


class StackUnderflow(RPNError):
    def __init__(self, operator, required, available):
        self.operator = operator
        self.required = required
        self.available = available
        if operator is None:
            message = 'Empty stack'
        else:
            message = "'{}' needs {} operand(s), stack has {}".format(
                operator, required, available)
        super().__init__(message)


class InvalidToken(RPNError):
    def __init__(self, text):
        self.text = text
        super().__init__("Invalid token '{}'".format(text))


class DivisionByZero(RPNError):
    def __init__(self):
        super().__init__('Division by zero')


class NegativeSquareRoot(RPNError):
    def __init__(self):
        super().__init__('Square root of a negative number')


class TangentUndefined(RPNError):
    def __init__(self):
        super().__init__('Tangent is undefined')


class InvalidFibonacciArg(RPNError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            'fib needs a non-negative integer, got {}'.format(value))


class InvalidPascalArgs(RPNError):
    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(
            'pascal needs integers 0 <= col <= row, got row {} col {}'.format(
                row, col))


class IncompleteExpression(RPNError):
    def __init__(self, size):
        self.size = size
        super().__init__(
            'Incomplete expression, {} value(s) left on stack'.format(size))


class UnknownOperator(RPNError):
    def __init__(self, token):
        self.token = token
        super().__init__("Unknown operator '{}'".format(token))


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions to RPNErrors.

    Passes through RPNErrors. fmt is formatted with the call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator


def format_number(value, precision=None):
    '''
    Render a number for display: 10 rather than 10.0, shortest repr otherwise.

    :param precision: Round to this many decimal places first, if given.
    '''
    if precision is not None and math.isfinite(value):
        value = round(value, precision)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))
