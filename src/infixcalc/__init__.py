'''
Infix scientific calculator.

Evaluates the expressions typed on a calculator keypad: + - * / ^, the 1/x
key, parentheses, pi and e, and the sin, cos, tan, asin, acos, atan, log, ln,
sqrt and fact functions. Trig works in degrees unless told otherwise.

Expressions are lexed, converted to postfix by the shunting-yard algorithm,
and run on a small stack machine, not eval()'d.
'''

from .util import (CalcError, InvalidCharacter, MismatchedParentheses,
                   MissingOperand, UnknownFunction, UnknownOperator,
                   FactorialDomainError, InvalidExpression)
from .tokens import Kind, Token, Operator, Function
from .lexer import Lexer
from .converter import Converter
from .machine import Machine
from .evaluator import Evaluator, evaluate


__all__ = 'evaluate', 'Evaluator', 'Machine', 'Converter', 'Lexer', \
    'Kind', 'Token', 'Operator', 'Function', \
    'CalcError', 'InvalidCharacter', 'MismatchedParentheses', \
    'MissingOperand', 'UnknownFunction', 'UnknownOperator', \
    'FactorialDomainError', 'InvalidExpression'
