'''
Infix to postfix conversion, as broken as the legacy calculator's.

A shunting-yard, with two differences:

- Precedence ascends through OPERATORS, so - < + < * < / < % < ^.
- When the top of the operator stack binds tighter than the incoming
  operator, the *whole* operator stack is flushed, not just the operators
  binding tighter.

No parentheses. Unary minus is emulated by lending the most recently pushed
operator, as a sign, to the numeral that follows it.
'''

import regex


# Lowest to highest precedence.
OPERATORS = '-+*/%^'


class InfixConverter:
    '''
    Converts one infix expression. Holds per-expression state only.
    '''

    # Numerals, or any other single character
    TOKEN = r'\d+|\D'
    NUMERAL = r'\d+'
    # Forces pending operators out before it.
    DISPLAY = 'd'
    SEPARATOR = ' '

    def __init__(self):
        self.postfix = []
        self.operators = []
        self.unary_minus = False

    def _isnumeral(self, token):
        match = regex.fullmatch(self.NUMERAL, token, flags=regex.ASCII)
        return match is not None

    def convert(self, infix):
        '''
        Return postfix for infix, separator-terminated, for re-evaluation.
        '''
        tokens = regex.findall(self.TOKEN, infix, flags=regex.ASCII)
        for i, token in enumerate(tokens):
            previous = tokens[i - 1] if i > 0 else ''
            following = tokens[i + 1] if i < len(tokens) - 1 else ''
            if token in OPERATORS:
                self._operator(token, previous, following)
            else:
                self._operand(token)
        self._flush()
        return ''.join(self.postfix)

    def _emit(self, token):
        self.postfix.append(token + self.SEPARATOR)

    def _operator(self, token, previous, following):
        '''
        Stack operator, toggling unary minus on a minus not after a numeral.
        '''
        if token == '-' and not self._isnumeral(previous):
            self.unary_minus = not self.unary_minus
        else:
            self.unary_minus = False

        precedence = OPERATORS.index(token)
        # A minus about to become a sign doesn't flush anything.
        if not (self.unary_minus and self._isnumeral(following)):
            if self.operators and self.operators[-1] > precedence:
                self._flush()
        self.operators.append(precedence)

    def _operand(self, token):
        if self.unary_minus and self._isnumeral(token) and self.operators:
            token = OPERATORS[self.operators.pop()] + token
            self.unary_minus = False
        elif token == self.DISPLAY:
            # 1+2*4 isn't 1d+2d*4d
            self._flush()
        self._emit(token)

    def _flush(self):
        while self.operators:
            self._emit(OPERATORS[self.operators.pop()])
