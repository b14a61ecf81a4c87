from collections import deque
import logging
import operator
import math

from .util import (wrap_user_errors, ieee754, divide,
                   InvalidExpression, MissingOperand, UnknownFunction,
                   UnknownOperator, FactorialDomainError)
from .tokens import Kind, Operator, Function


logger = logging.getLogger(__name__)


def factorial(n):
    '''
    n! as a float, for n a non-negative integral float.
    '''
    if n < 0 or not float(n).is_integer():
        raise FactorialDomainError(n)
    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
        # Stays infinite; no point counting to a huge n.
        if math.isinf(result):
            break
    return result


@ieee754
def power(base, exponent):
    if base == 0 and exponent < 0:
        # -0 to an odd power stays negative.
        if float(exponent).is_integer() and exponent % 2:
            return math.copysign(math.inf, base)
        return math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # Odd integral exponents keep the sign of the base.
        if base < 0 and float(exponent).is_integer() and exponent % 2:
            return -math.inf
        raise


def logarithm(f):
    '''
    Logarithm going to -inf at zero, rather than raising.
    '''
    @ieee754
    def wrapped(x):
        if x == 0:
            return -math.inf
        return f(x)
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


class Machine:
    '''
    Arithmetic stack machine running postfix token lists.

    A fresh stack per run; nothing carries over between runs.
    '''

    # Angle units: (to radians, from radians)
    ANGLES = {
        'deg': (math.radians, math.degrees),
        'rad': (float, float),
    }
    DEFAULT_ANGLE = 'deg'

    # Binary operators on the top two items of the stack.
    BINARY = {
        Operator.ADD: operator.__add__,
        Operator.SUB: operator.__sub__,
        Operator.MUL: operator.__mul__,
        Operator.DIV: divide,
        Operator.POW: power,
    }

    # Unary operators on the top of the stack.
    UNARY = {
        Operator.RECIPROCAL: lambda x: divide(1.0, x),
    }

    # Functions not caring about angles.
    MATH = {
        Function.LOG: logarithm(math.log10),
        Function.LN: logarithm(math.log),
        Function.SQRT: ieee754(math.sqrt),
        Function.FACT: factorial,
    }
    TRIG = {
        Function.SIN: ieee754(math.sin),
        Function.COS: ieee754(math.cos),
        Function.TAN: ieee754(math.tan),
    }
    INVERSE_TRIG = {
        Function.ASIN: ieee754(math.asin),
        Function.ACOS: ieee754(math.acos),
        Function.ATAN: ieee754(math.atan),
    }

    def __init__(self, angle=None):
        '''
        Create stack machine.

        :param angle: Unit of trig arguments and inverse trig results, a key
            of ANGLES.
        '''
        if angle is None:
            angle = type(self).DEFAULT_ANGLE
        self.angle = angle
        self.toradians, self.fromradians = type(self).ANGLES[angle]

    def run(self, postfix):
        '''
        Evaluate postfix tokens, returning the single resulting float.
        '''
        stack = deque()
        for token in postfix:
            if token.kind is Kind.NUMBER:
                stack.append(self._iconvert(token.text))
            elif token.kind is Kind.IDENTIFIER:
                stack.append(self._call(token.text, stack))
            else:
                stack.append(self._operate(token.text, stack))
        if len(stack) != 1:
            raise InvalidExpression('Invalid expression: {} value(s) left'
                                    .format(len(stack)))
        return stack.pop()

    @wrap_user_errors('Cannot convert {1}')
    def _iconvert(self, number):
        '''
        Convert a number literal to the internal representation.
        '''
        return float(number)

    def function(self, name):
        '''
        Return the callable for function name, in this machine's angle unit.
        '''
        function = Function.lookup(name)
        if function is None:
            raise UnknownFunction(name)
        cls = type(self)
        if function in cls.TRIG:
            f = cls.TRIG[function]
            return lambda x: f(self.toradians(x))
        if function in cls.INVERSE_TRIG:
            f = cls.INVERSE_TRIG[function]
            return lambda x: self.fromradians(f(x))
        return cls.MATH[function]

    def _call(self, name, stack):
        f = self.function(name)
        argument, = self._popstack(stack, name)
        return f(argument)

    def _operate(self, symbol, stack):
        operator = Operator.lookup(symbol)
        if operator in type(self).UNARY:
            only, = self._popstack(stack, symbol)
            return type(self).UNARY[operator](only)
        if operator in type(self).BINARY:
            # Topmost is the right operand.
            right, left = self._popstack(stack, symbol, n=2)
            return type(self).BINARY[operator](left, right)
        raise UnknownOperator(symbol)

    def _popstack(self, stack, name, n=1):
        '''
        Pop n args from stack, topmost first.
        '''
        if len(stack) < n:
            raise MissingOperand(name)
        return [stack.pop() for _ in range(n)]
