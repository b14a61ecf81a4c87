'''
Token kinds, operator and function tables shared by the pipeline stages.
'''

from collections import namedtuple
from enum import Enum
import math


class Kind(Enum):
    NUMBER = 'number'
    IDENTIFIER = 'identifier'
    OPERATOR = 'operator'
    LPAREN = 'lparen'
    RPAREN = 'rparen'


class Token(namedtuple('Token', ['kind', 'text'])):
    '''
    One lexeme. Numbers keep their literal text until evaluation.
    '''
    __slots__ = ()

    def __str__(self):
        return self.text

    @classmethod
    def number(cls, text):
        return cls(Kind.NUMBER, str(text))

    @classmethod
    def operator(cls, symbol):
        return cls(Kind.OPERATOR, symbol)


class Operator(Enum):
    '''
    Operators, with their (symbol, precedence, right associativity).
    '''
    ADD = ('+', 2, False)
    SUB = ('-', 2, False)
    MUL = ('*', 3, False)
    DIV = ('/', 3, False)
    POW = ('^', 4, True)
    RECIPROCAL = ('1/', 4, False)

    def __init__(self, symbol, precedence, right):
        self.symbol = symbol
        self.precedence = precedence
        self.right = right

    @classmethod
    def lookup(cls, symbol):
        '''
        Return the operator spelled symbol, or None.
        '''
        return _OPERATORS.get(symbol)

    @property
    def prefix(self):
        return self is Operator.RECIPROCAL


_OPERATORS = {operator.symbol: operator for operator in Operator}


class Function(Enum):
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    LOG = 'log'
    LN = 'ln'
    SQRT = 'sqrt'
    ASIN = 'asin'
    ACOS = 'acos'
    ATAN = 'atan'
    FACT = 'fact'

    @classmethod
    def lookup(cls, name):
        try:
            return cls(name)
        except ValueError:
            return None


# Named constants, as literal text. repr() round-trips exactly.
CONSTANTS = {
    'pi': repr(math.pi),
    'e': repr(math.e),
}
