import sys

from .util import INT_MIN, saturate


class OperandStack:
    '''
    Bounded stack of saturated 32-bit integers.

    Never raises: every edge case prints a diagnostic and degrades to a safe
    value, like the legacy calculator.
    '''

    # Operands needed by a binary operator.
    MIN_SIZE = 2
    MAX_SIZE = 23

    def __init__(self):
        self.values = []

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def push(self, value):
        '''
        Clamp value and push it, or drop it if the stack is full.
        '''
        if not self.overflow():
            self.values.append(saturate(value))

    def pop(self):
        '''
        Pop the top of the stack. Empty stack pops INT_MIN, silently.
        '''
        if not self.values:
            return INT_MIN
        return self.values.pop()

    def peek(self):
        '''
        Print the element on the top of the stack.
        '''
        if self.values:
            print(self.values[-1])
        else:
            print('Stack empty.', file=sys.stderr)

    def display(self):
        '''
        Print all elements on the stack, bottom of the stack first.
        '''
        if self.values:
            print(*self.values, sep='\n')
        else:
            print(INT_MIN, file=sys.stderr)

    def underflow(self):
        if len(self.values) < self.MIN_SIZE:
            print('Stack underflow.', file=sys.stderr)
            return True
        return False

    def overflow(self):
        if len(self.values) >= self.MAX_SIZE:
            print('Stack overflow.', file=sys.stderr)
            return True
        return False
