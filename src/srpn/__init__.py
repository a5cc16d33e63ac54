'''
Saturating RPN calculator.

Replays, bug for bug, a legacy Reverse Polish Notation calculator: integers
saturate at the 32-bit bounds instead of wrapping, the stack holds at most 23
of them, infix expressions are converted with a peculiar precedence, and the
random numbers are glibc's, first 22 repeated once. Division by zero in the
wrong place crashes, on purpose.

Not a calculator you should do your accounts with. That's the point!
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .stack import OperandStack
from .prng import RandomSequence
from .infix import InfixConverter


__all__ = ('Machine', 'Lexer', 'CLI',
           'OperandStack', 'RandomSequence', 'InfixConverter')
