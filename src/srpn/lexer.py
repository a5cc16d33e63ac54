from functools import reduce
import operator

import regex

from .infix import OPERATORS


class Lexer:
    '''
    Lexer for the SRPN *regular* grammar.

    Lines are split on whitespace; each token is then classified, whole, by
    the first alternative of LEXEME it fully matches. Classification is
    purely textual; numeric range is the machine's problem.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Alternatives are tried in order; keep them that way!
    OCTAL = r'-?0[0-7]+'
    # Legacy quirk: 080, 0123456789, -0999 and friends are silently dropped.
    # 010 is caught as octal first, and 08 falls through to decimal.
    MALFORMED = r'-?0\d{2,}'
    DECIMAL = r'-?\d+'
    OPERATOR = r'[' + ''.join(map(regex.escape, OPERATORS)) + r']'
    # Verbose mode would take a bare # for a comment of its own.
    COMMENT = r'\#'
    # Any other lone character: commands, or garbage.
    CHARACTER = r'\S'
    # Anything left, e.g., 1+2*3, -3^2d
    INFIX = r'\S+'
    SPACE = r'\s+'

    NUMBER = r'(?<octal>' + OCTAL + r')|' \
             r'(?<malformed>' + MALFORMED + r')|' \
             r'(?<decimal>' + DECIMAL + r')'
    # All possible lexemes, # toggling comments.
    LEXEME = NUMBER + r'|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<comment>' + COMMENT + r')|' \
             r'(?<character>' + CHARACTER + r')|' \
             r'(?<infix>' + INFIX + r')'
    # All possible lexemes, # being just another character.
    UNCOMMENTED = NUMBER + r'|' \
                  r'(?<operator>' + OPERATOR + r')|' \
                  r'(?<character>' + CHARACTER + r')|' \
                  r'(?<infix>' + INFIX + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.VERSION0,
                    regex.VERBOSE},
                   0)

    def split(self, line):
        '''
        Return the non-empty whitespace-separated tokens of a line.
        '''
        return [token
                for token
                in regex.split(type(self).SPACE, line, flags=type(self).FLAGS)
                if token]

    def lex(self, line, comments=True):
        '''
        Take a line and yield a match for every token.

        :param comments: Whether # is lexed as a comment toggle.
        '''
        grammar = type(self).LEXEME if comments else type(self).UNCOMMENTED
        for token in self.split(line):
            yield regex.fullmatch(grammar, token, flags=type(self).FLAGS)

    def matchedgroups(self, match):
        '''
        Return lexeme matches, by kind.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
