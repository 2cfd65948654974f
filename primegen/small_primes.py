from bisect import bisect_left

from primality import TestResult

# Every prime below 256
SMALL_PRIMES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
    101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151, 157, 163, 167, 173, 179, 181, 191, 193,
    197, 199, 211, 223, 227, 229, 233, 239, 241, 251,
)

# Numbers below this bound are classified exactly by the table
SMALL_LIMIT = 256


def is_small_prime(n: int) -> bool:
    i = bisect_left(SMALL_PRIMES, n)
    return i < len(SMALL_PRIMES) and SMALL_PRIMES[i] == n


# Returns None when the number is too big to be decided without random rounds
def small_test(n: int) -> TestResult | None:
    if n == 1:
        return TestResult.ONE
    if n == 2:  # noqa: PLR2004
        return TestResult.PRIME
    if n % 2 == 0:
        return TestResult.COMPOSITE

    if n < SMALL_LIMIT:
        return TestResult.PRIME if is_small_prime(n) else TestResult.COMPOSITE
    return None
