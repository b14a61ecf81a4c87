from collections import deque
import logging

from .util import MismatchedParentheses
from .tokens import Kind, Operator, Token


logger = logging.getLogger(__name__)


class Converter:
    '''
    Shunting-yard conversion of infix tokens to postfix (RPN) tokens.

    Stateless; the operator stack lives for one call of convert.
    '''

    # Unary minus is rewritten as 0 - x. On the operator stack the - binds
    # like ^ so that 3*-2 is -6 and -2^2 is -4.
    NEGATE = Token.operator(Operator.SUB.symbol)
    NEGATE_PRECEDENCE = Operator.POW.precedence

    def convert(self, tokens):
        '''
        Return tokens reordered in postfix notation.
        '''
        output = []
        stack = deque()
        previous = None
        for token in tokens:
            if token.kind is Kind.NUMBER:
                output.append(token)
            elif token.kind is Kind.IDENTIFIER:
                # Functions wait on the stack for their argument. Unknown
                # names too; the machine rejects them.
                stack.append(token)
            elif token.kind is Kind.OPERATOR:
                if self._isunary(token, previous):
                    output.append(Token.number(0))
                    stack.append(type(self).NEGATE)
                elif self._isprefix(token):
                    # Nothing on the left to give way to.
                    stack.append(token)
                else:
                    while stack and self._yields(token, stack[-1]):
                        output.append(stack.pop())
                    stack.append(token)
            elif token.kind is Kind.LPAREN:
                stack.append(token)
            elif token.kind is Kind.RPAREN:
                while stack and stack[-1].kind is not Kind.LPAREN:
                    output.append(stack.pop())
                if not stack:
                    raise MismatchedParentheses()
                stack.pop()
                if stack and stack[-1].kind is Kind.IDENTIFIER:
                    output.append(stack.pop())
            previous = token
        while stack:
            top = stack.pop()
            if top.kind in {Kind.LPAREN, Kind.RPAREN}:
                raise MismatchedParentheses()
            output.append(top)
        logger.debug('postfix %s', ' '.join(map(str, output)))
        return output

    def _isunary(self, token, previous):
        '''
        Return True for a - with no left operand.
        '''
        if token.text != Operator.SUB.symbol:
            return False
        return previous is None or \
            previous.kind in {Kind.OPERATOR, Kind.LPAREN}

    def _isprefix(self, token):
        operator = Operator.lookup(token.text)
        return operator is not None and operator.prefix

    def _precedence(self, token):
        if token is type(self).NEGATE:
            return type(self).NEGATE_PRECEDENCE
        operator = Operator.lookup(token.text)
        return 0 if operator is None else operator.precedence

    def _yields(self, token, top):
        '''
        Return True if incoming token must let top go to the output first.
        '''
        if top.kind is not Kind.OPERATOR:
            return False
        incoming = Operator.lookup(token.text)
        if incoming is None:
            return False
        precedence = self._precedence(token)
        above = self._precedence(top)
        return above > precedence or \
            (above == precedence and not incoming.right)
