from .errors import ArithmeticPreconditionError, InvalidInputError


# floor(log2(n)), exact for any size of n
def log2(n: int) -> int:
    if n < 0:
        msg = f'Expected a positive number, but got: {n}'
        raise InvalidInputError(msg)
    if n == 0:
        msg = 'log2 is undefined for 0'
        raise ArithmeticPreconditionError(msg)

    return n.bit_length() - 1
