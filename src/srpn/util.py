INT_MIN = -2147483648
INT_MAX = 2147483647


class SRPNError(Exception):
    '''
    User error that only aborts the current token.
    '''
    pass


class FatalError(Exception):
    '''
    Crash of the legacy calculator. The host must exit with status.

    Deliberately not an SRPNError, so that nothing contains it.
    '''

    def __init__(self, status):
        super().__init__(status)
        self.status = status


def saturate(value):
    '''
    Clamp a real into the signed 32-bit range, truncating toward zero.
    '''
    if value != value:
        return 0
    return int(max(INT_MIN, min(INT_MAX, value)))


def parseint(number, base):
    '''
    Parse a literal, clamping to the bound on its side if out of range.
    '''
    value = int(number, base)
    if value < INT_MIN or value > INT_MAX:
        return INT_MIN if number.startswith('-') else INT_MAX
    return value
