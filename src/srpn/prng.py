'''
Legacy-compatible random sequence.

This is glibc's random(3) TYPE_3 additive feedback generator, as seeded by
srand(), plus the quirk of the legacy calculator: the first 22 numbers are
produced twice before the sequence carries on for good.
'''

UINT32 = 0xFFFFFFFF


class RandomSequence:
    '''
    Unending, deterministic sequence of non-negative 31-bit integers.

    Use it as an iterator: next(sequence).
    '''

    SIZE = 344
    # Lags of the feedback, relative to the cell being overwritten.
    TAPS = 313, 341
    REPEAT = 22
    MULTIPLIER = 16807
    MODULUS = 2147483647

    def __init__(self, seed):
        self.table = [0] * self.SIZE
        self.index = 0
        self.repeated = False
        self.reseed(seed)

    def reseed(self, seed):
        '''
        Fill the table from seed and rewind. Doesn't reset the repeat.
        '''
        # Seeds are C ints: fold anything wider to signed 32 bits.
        seed = (seed & UINT32) - ((seed & 0x80000000) << 1)
        table = self.table
        table[0] = seed & UINT32
        # The first step sees the signed seed; remainder truncates toward
        # zero, as in C.
        previous = seed
        for i in range(1, 31):
            product = self.MULTIPLIER * previous
            remainder = abs(product) % self.MODULUS
            if product < 0:
                remainder = -remainder
            previous = table[i] = remainder & UINT32
        for i in range(31, self.SIZE):
            feedback = table[i - 3] if i >= 34 else 0
            table[i] = (table[i - 31] + feedback) & UINT32
        self.index = 0

    def __iter__(self):
        return self

    def __next__(self):
        table = self.table
        index = self.index
        first, second = self.TAPS
        table[index] = (table[(index + first) % self.SIZE] +
                        table[(index + second) % self.SIZE]) & UINT32
        value = table[index] >> 1

        self.index = (index + 1) % self.SIZE
        if not self.repeated and self.index == self.REPEAT:
            self.repeated = True
            self.index = 0
        return value
