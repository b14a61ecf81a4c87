from functools import wraps
import math


class CalcError(Exception):
    '''
    Base of everything the evaluator raises on a bad expression.

    ``stage`` names the pipeline step that gave up.
    '''
    stage = None


class InvalidCharacter(CalcError):
    stage = 'tokenize'

    def __init__(self, char):
        super().__init__('Invalid character {}'.format(repr(char)))
        self.char = char


class MismatchedParentheses(CalcError):
    stage = 'convert'

    def __init__(self):
        super().__init__('Mismatched parentheses')


class MissingOperand(CalcError):
    stage = 'evaluate'

    def __init__(self, operator):
        super().__init__('Missing operand for {}'.format(operator))
        self.operator = operator


class UnknownFunction(CalcError):
    stage = 'evaluate'

    def __init__(self, name):
        super().__init__('Unknown function {}'.format(repr(name)))
        self.name = name


class UnknownOperator(CalcError):
    stage = 'evaluate'

    def __init__(self, symbol):
        super().__init__('Unknown operator {}'.format(repr(symbol)))
        self.symbol = symbol


class FactorialDomainError(CalcError):
    stage = 'evaluate'

    def __init__(self, n):
        super().__init__('Factorial only for non-negative integers, '
                         'not {}'.format(n))
        self.n = n


class InvalidExpression(CalcError):
    stage = 'evaluate'

    def __init__(self, reason='Invalid expression'):
        super().__init__(reason)


def wrap_user_errors(fmt):
    '''
    Decorator that turns conversion failures into InvalidExpression.

    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except (ValueError, TypeError) as e:
                raise InvalidExpression(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator


def ieee754(f):
    '''
    Give a math function IEEE 754 results instead of exceptions.

    Domain errors become NaN, overflows become infinity.
    '''
    @wraps(f)
    def wrapper(*args):
        try:
            return f(*args)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    return wrapper


def divide(left, right):
    '''
    Float division by zero, the way hardware does it.
    '''
    if right:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)
