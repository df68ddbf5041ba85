'''
RPN lexer tests
'''

from rpncalc.lexer import Lexer, Token, NUMBER, OPERATOR, INVALID
from rpncalc.operators import OPERATORS

from pytest import mark


def test_empty_line(lexer):
    assert list(lexer.lex('')) == []
    assert list(lexer.lex(' \t  ')) == []


def test_whitespace_runs(lexer):
    tokens = list(lexer.lex('  5\t 5   + \n'))
    assert [t.text for t in tokens] == ['5', '5', '+']
    assert [t.kind for t in tokens] == [NUMBER, NUMBER, OPERATOR]


@mark.parametrize('text,value', [
    ('0', 0.0),
    ('42', 42.0),
    ('-7', -7.0),
    ('3.25', 3.25),
    ('-0.5', -0.5),
    ('5.', 5.0),
    ('.5', 0.5),
    ('-.5', -0.5),
])
def test_numbers(lexer, text, value):
    assert lexer.classify(text) == Token(NUMBER, text, value)


@mark.parametrize('text', sorted(OPERATORS))
def test_operators(lexer, text):
    assert lexer.classify(text) == Token(OPERATOR, text, None)


def test_minus_alone_is_operator(lexer):
    assert lexer.classify('-').kind == OPERATOR


@mark.parametrize('text', [
    '..',
    '.',
    '-.',
    '1.2.3',
    '--1',
    '1e5',
    '1-',
    '+5',
    'abc',
    'SQRT',
    'sqrtx',
    '5+',
    '٣',
])
def test_invalid(lexer, text):
    assert lexer.classify(text) == Token(INVALID, text, None)


def test_lex_keeps_going_past_invalid(lexer):
    kinds = [t.kind for t in lexer.lex('1 abc +')]
    assert kinds == [NUMBER, INVALID, OPERATOR]


def test_stateless():
    assert list(Lexer().lex('2 3 ^')) == list(Lexer().lex('2 3 ^'))


def test_unicode_whitespace_separates(lexer):
    tokens = list(lexer.lex('5\xa05 +'))
    assert [t.text for t in tokens] == ['5', '5', '+']
