from functools import reduce
import logging
import operator

import regex

from .util import InvalidCharacter
from .tokens import Kind, Operator, Token, CONSTANTS


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for the infix expression *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    state beyond its settings.
    '''
    # Maximal munch of digits and dots. 1.2.3 is one (bad) number; the
    # machine rejects it when converting.
    NUMBER = r'[\d.]+'
    # Function names and constants
    IDENTIFIER = r'\p{L}+'
    # Single character operators; 1/ is assembled from a number and a / in lex
    OPERATOR = r'(?:' + r'|'.join(regex.escape(operator.symbol)
                                  for operator
                                  in Operator
                                  if len(operator.symbol) == 1) + r')'
    LPAREN = r'\('
    RPAREN = r'\)'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<identifier>' + IDENTIFIER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<lparen>' + LPAREN + r')|' \
             r'(?<rparen>' + RPAREN + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1},
                   0)

    def __init__(self, constants=True):
        '''
        :param constants: Turn pi and e identifiers into numbers.
        '''
        self.constants = constants
        self.pattern = regex.compile(type(self).LEXEME,
                                     flags=type(self).FLAGS)

    def lex(self, line):
        '''
        Take a preprocessed line and return its tokens.

        Stops on first bad character.
        '''
        tokens = []
        position = 0
        while position < len(line):
            match = self.pattern.match(line, position)
            if match is None:
                raise InvalidCharacter(line[position])
            tokens.append(self._token(match, tokens))
            position = match.end()
        logger.debug('tokens %s', ' '.join(map(str, tokens)))
        return tokens

    def _token(self, match, tokens):
        '''
        Build the token for match, rewriting tokens in place for 1/.
        '''
        kind = Kind(match.lastgroup)
        text = match.group()
        if kind is Kind.IDENTIFIER and self.constants and text in CONSTANTS:
            return Token.number(CONSTANTS[text])
        # A standalone 1 then / is the reciprocal operator. Maximal munch
        # means a number token of exactly '1' had no digits before it.
        if (kind is Kind.OPERATOR and text == '/' and tokens and
                tokens[-1] == Token.number('1')):
            tokens.pop()
            return Token.operator(Operator.RECIPROCAL.symbol)
        return Token(kind, text)
