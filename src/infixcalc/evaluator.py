import logging

from .preprocessor import Preprocessor
from .lexer import Lexer
from .converter import Converter
from .machine import Machine


logger = logging.getLogger(__name__)


class Evaluator:
    '''
    Infix expression evaluator: preprocess, lex, convert to postfix, run.

    Holds settings only, so one instance can serve any number of callers.
    '''

    DEFAULT_SUBSTITUTE_CONSTANTS = False

    def __init__(self, angle=None, substitute_constants=None):
        '''
        :param angle: Trig angle unit, 'deg' or 'rad'. See Machine.ANGLES.
        :param substitute_constants: Replace pi and e textually before
            lexing, like the old calculator did.
        '''
        if substitute_constants is None:
            substitute_constants = type(self).DEFAULT_SUBSTITUTE_CONSTANTS
        self.preprocessor = Preprocessor(self.evaluate,
                                         substitute_constants)
        self.lexer = Lexer(constants=not substitute_constants)
        self.converter = Converter()
        self.machine = Machine(angle=angle)

    def postfix(self, expression):
        '''
        Return the postfix tokens of expression, without running them.
        '''
        preprocessed = self.preprocessor.preprocess(expression)
        if preprocessed != expression:
            logger.debug('preprocessed %r to %r', expression, preprocessed)
        return self.converter.convert(self.lexer.lex(preprocessed))

    def evaluate(self, expression):
        '''
        Evaluate infix expression to a float.

        Raises a CalcError subclass on the first problem found.
        '''
        return self.machine.run(self.postfix(expression))


_default = Evaluator()


def evaluate(expression):
    '''
    Evaluate infix expression with default settings.
    '''
    return _default.evaluate(expression)
