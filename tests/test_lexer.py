'''
SRPN lexer tests
'''

from srpn.lexer import Lexer


def kinds(line, comments=True):
    l = Lexer()
    return [tuple(l.matchedgroups(m).items())[0]
            for m in l.lex(line, comments=comments)]


def test_split_on_any_whitespace():
    l = Lexer()
    assert l.split('  1\t2  +  ') == ['1', '2', '+']
    assert l.split('') == []


def test_numbers():
    assert kinds('010 -017 08 -8 0 123') == [('octal', '010'),
                                             ('octal', '-017'),
                                             ('decimal', '08'),
                                             ('decimal', '-8'),
                                             ('decimal', '0'),
                                             ('decimal', '123')]


def test_zero_padded_decimals_are_malformed():
    assert kinds('080 -0999 0128') == [('malformed', '080'),
                                       ('malformed', '-0999'),
                                       ('malformed', '0128')]


def test_operators_and_characters():
    assert kinds('- + * / % ^ d r = x') == [
        ('operator', '-'), ('operator', '+'), ('operator', '*'),
        ('operator', '/'), ('operator', '%'), ('operator', '^'),
        ('character', 'd'), ('character', 'r'), ('character', '='),
        ('character', 'x'),
    ]


def test_infix():
    assert kinds('1+2 -3*4 +5 dd') == [('infix', '1+2'),
                                       ('infix', '-3*4'),
                                       ('infix', '+5'),
                                       ('infix', 'dd')]


def test_comment_toggle():
    assert kinds('# 1#') == [('comment', '#'), ('infix', '1#')]


def test_hash_is_a_character_without_comments():
    assert kinds('#', comments=False) == [('character', '#')]
