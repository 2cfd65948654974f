from typing import override

from primality import TestResult

from .probabilistic import ProbabilisticTest


# n - 1 = 2^s * t, t is odd
def decompose(n: int) -> tuple[int, int]:
    t = n - 1
    s = 0
    while t % 2 == 0:
        t //= 2
        s += 1
    return s, t


# https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test
# The probability of a false positive is at most (1/4)^rounds
class MillerRabin(ProbabilisticTest):
    name = 'miller-rabin'

    @override
    def _run(self, number: int, rounds: int) -> TestResult:
        s, t = decompose(number)
        for _ in range(rounds):
            if not self._round(number, s, t):
                return TestResult.COMPOSITE
        return TestResult.PROBABLY_PRIME

    def _round(self, n: int, s: int, t: int) -> bool:
        a = self._witness(n)
        x = pow(a, t, n)
        if x in (1, n - 1):
            return True

        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                return True
            # nontrivial square root of 1
            if x == 1:
                return False

        return False
