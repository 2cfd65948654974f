from typing import override

from primality import TestResult

from .probabilistic import ProbabilisticTest


# https://en.wikipedia.org/wiki/Fermat_primality_test
# Carmichael numbers pass it for every coprime base, use Miller-Rabin when it matters
class Fermat(ProbabilisticTest):
    name = 'fermat'

    @override
    def _run(self, number: int, rounds: int) -> TestResult:
        for _ in range(rounds):
            a = self._witness(number)
            while a % number == 0:
                a = self._witness(number)

            if pow(a, number - 1, number) != 1:
                return TestResult.COMPOSITE
        return TestResult.PROBABLY_PRIME
