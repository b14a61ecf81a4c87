from decimal import Decimal
import logging
import math

import regex

from .util import CalcError, divide
from .tokens import CONSTANTS, Operator


logger = logging.getLogger(__name__)


class Preprocessor:
    '''
    Textual clean up of an expression before lexing.
    '''

    RECIPROCAL = Operator.RECIPROCAL.symbol
    SPACE = regex.compile(r'\s+')

    def __init__(self, evaluate, substitute_constants=False):
        '''
        :param evaluate: Callable to evaluate the remainder of a leading 1/.
        :param substitute_constants: Blindly replace pi and e in the text,
            rather than leaving constants to the lexer.
        '''
        self.evaluate = evaluate
        self.substitute_constants = substitute_constants

    def preprocess(self, expression):
        expression = self.expand_reciprocal(expression)
        expression = type(self).SPACE.sub('', expression)
        if self.substitute_constants:
            # Also mangles any name containing an e.
            expression = expression.replace('pi', CONSTANTS['pi'])
            expression = expression.replace('e', CONSTANTS['e'])
        return expression

    def expand_reciprocal(self, expression):
        '''
        Replace a leading 1/x by the decimal value of 1/x, if possible.

        Best effort: when x doesn't evaluate, or its reciprocal has no finite
        decimal form, the expression is returned untouched and the lexer picks
        up the 1/ operator instead.
        '''
        prefix = type(self).RECIPROCAL
        if not expression.startswith(prefix):
            return expression
        try:
            value = divide(1.0, self.evaluate(expression[len(prefix):]))
        except CalcError as e:
            logger.debug('keeping %r, remainder failed: %s', expression, e)
            return expression
        except RecursionError:
            # Long 1/1/1/... chains; the inline operator needs no recursion.
            logger.debug('keeping %r, too many leading 1/', expression)
            return expression
        if not math.isfinite(value):
            logger.debug('keeping %r, reciprocal is %r', expression, value)
            return expression
        return positional(value)


def positional(value):
    '''
    Shortest round-tripping decimal text for value, without an exponent.

    The lexer has no exponent syntax, so 1e-05 must read 0.00001.
    '''
    return format(Decimal(repr(value)), 'f')
