'''
Lexer tests
'''

import math

import regex

from infixcalc import Lexer
from infixcalc.util import InvalidCharacter
from infixcalc.tokens import Kind, Token

from pytest import raises


def texts(tokens):
    return [token.text for token in tokens]


def test_maximal_munch(lexer):
    tokens = lexer.lex('12.5+sqrt(16)')
    assert texts(tokens) == ['12.5', '+', 'sqrt', '(', '16', ')']
    assert [token.kind for token in tokens] == [Kind.NUMBER,
                                                Kind.OPERATOR,
                                                Kind.IDENTIFIER,
                                                Kind.LPAREN,
                                                Kind.NUMBER,
                                                Kind.RPAREN]


def test_multiple_dots_are_one_number(lexer):
    # Rejected later, by the machine.
    assert lexer.lex('1.2.3') == [Token(Kind.NUMBER, '1.2.3')]


def test_invalid_character(lexer):
    with raises(InvalidCharacter, match=regex.escape("'@'")) as info:
        lexer.lex('2@3')
    assert info.value.char == '@'
    assert info.value.stage == 'tokenize'


def test_space_is_invalid_after_preprocessing(lexer):
    with raises(InvalidCharacter):
        lexer.lex('2 3')


def test_inline_reciprocal(lexer):
    assert texts(lexer.lex('5+1/2')) == ['5', '+', '1/', '2']
    assert lexer.lex('5+1/2')[2] == Token(Kind.OPERATOR, '1/')


def test_division_after_longer_number(lexer):
    assert texts(lexer.lex('21/2')) == ['21', '/', '2']
    assert texts(lexer.lex('1.1/2')) == ['1.1', '/', '2']
    assert texts(lexer.lex('(2+1)/2')) == ['(', '2', '+', '1', ')', '/', '2']


def test_constants_become_numbers(lexer):
    assert lexer.lex('pi') == [Token(Kind.NUMBER, repr(math.pi))]
    assert lexer.lex('e') == [Token(Kind.NUMBER, repr(math.e))]
    # Only whole identifiers are constants
    assert lexer.lex('exp') == [Token(Kind.IDENTIFIER, 'exp')]


def test_constants_left_alone(lexer):
    assert Lexer(constants=False).lex('pi') == [Token(Kind.IDENTIFIER, 'pi')]
