import math
import sys

from .util import SRPNError, FatalError, parseint
from .stack import OperandStack
from .prng import RandomSequence
from .infix import InfixConverter
from .lexer import Lexer


# Exit status of the legacy calculator's SIGFPE.
ARITHMETIC_FAULT = 136


def _subtract(left, right):
    return float(left) - right


def _add(left, right):
    return float(left) + right


def _multiply(left, right):
    return float(left) * right


def _divide(left, right):
    if right == 0:
        raise SRPNError('Divide by 0.')
    return left / right


def _modulo(left, right):
    # Yes, the left operand. The legacy calculator checks the wrong one, and
    # then dies on the right one.
    if left == 0:
        raise SRPNError('Divide by 0.')
    if right == 0:
        raise FatalError(ARITHMETIC_FAULT)
    return math.fmod(left, right)


def _power(left, right):
    if right < 0:
        raise SRPNError('Negative power.')
    try:
        return math.pow(left, right)
    except OverflowError:
        # Saturates on push anyway.
        if left < 0 and right % 2:
            return -math.inf
        return math.inf


class Machine:
    '''
    Saturating 32-bit stack machine (legacy SRPN calculator).

    Takes whole lines, splits and classifies their tokens, and runs them.
    Postfix, but tokens that look like infix expressions are converted and
    run as postfix in turn.

    All state (stack, random sequence, comment mode) lives here, and
    persists from line to line.
    '''

    DEFAULT_SEED = 1

    # Arithmetic operators on the items of a machine.
    BUILTINS = {
        '-': _subtract,
        '+': _add,
        '*': _multiply,
        '/': _divide,
        '%': _modulo,
        '^': _power,
    }

    def __init__(self, seed=None, verbose=None):
        '''
        Create empty stack machine.

        :param seed: Seed of the random sequence; the legacy one by default.
        :param verbose: Echo infix conversions to stderr.
        '''
        if seed is None:
            seed = type(self).DEFAULT_SEED
        self.stack = OperandStack()
        self.random = RandomSequence(seed)
        self.lexer = Lexer()
        self.comment = False
        self.verbose = verbose

    def process(self, line, comments=True):
        '''
        Run every token of a line.

        User errors are reported and only abort their own token. FatalErrors
        propagate: the host must exit.

        :param comments: Whether # toggles comment mode. Off when re-running
                         converted infix.
        '''
        for match in self.lexer.lex(line, comments=comments):
            try:
                self.feed(self.lexer.matchedgroups(match))
            except SRPNError as e:
                print(e.args[0], file=sys.stderr)

    def feed(self, groups):
        '''
        Stack or run one lexeme on machine.

        :param groups: Lexeme matches, by kind.
        '''
        if 'comment' in groups:
            self.comment = not self.comment
        elif self.comment:
            return
        elif 'octal' in groups:
            self.stack.push(parseint(groups['octal'], 8))
        elif 'malformed' in groups:
            return
        elif 'decimal' in groups:
            self.stack.push(parseint(groups['decimal'], 10))
        elif 'operator' in groups:
            self._apply(groups['operator'])
        elif 'character' in groups:
            self._call(groups['character'])
        elif 'infix' in groups:
            self._infix(groups['infix'])

    def _apply(self, operator):
        '''
        Apply binary operator to the two elements at the top of the stack.

        On user error, puts both operands back as they were.
        '''
        if self.stack.underflow():
            return
        right = self.stack.pop()
        left = self.stack.pop()
        try:
            result = type(self).BUILTINS[operator](left, right)
        except SRPNError:
            self.stack.push(left)
            self.stack.push(right)
            raise
        self.stack.push(result)

    def _call(self, character):
        try:
            function = type(self).FUNCTIONS[character]
        except KeyError:
            raise SRPNError('Unrecognised operator or operand "{}".'
                            .format(character))
        function(self)

    def _infix(self, infix):
        postfix = InfixConverter().convert(infix)
        if self.verbose:
            print(infix, '->', postfix, file=sys.stderr)
        self.process(postfix, comments=False)

    def printtop(self):
        '''
        Print the element on the top of the stack.
        '''
        self.stack.peek()

    def printstack(self):
        '''
        Print all elements on the stack.
        '''
        self.stack.display()

    def pshrandom(self):
        '''
        Push the next number of the random sequence, unless the stack is full.
        '''
        if not self.stack.overflow():
            self.stack.push(next(self.random))

    # Language mapping to stack operations.
    FUNCTIONS = {
        'd': printstack,
        'r': pshrandom,
        '=': printtop,
    }
