import secrets
from typing import Protocol, override

from primality import PrimalityTest, TestResult

from .bits import log2
from .errors import InvalidInputError
from .small_primes import small_test


# Satisfied by both random.Random and secrets.SystemRandom
class RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...

    def getrandbits(self, k: int, /) -> int: ...


class ProbabilisticTest(PrimalityTest):
    """
    Common part of the random-witness tests.

    Small numbers are answered exactly from the prime table, everything else
    goes through `rounds` random rounds of the concrete test. When `rounds` is
    omitted it becomes log2(number), so bigger candidates get more rounds.
    """

    random: RandomSource

    def __init__(self, random: RandomSource | None = None):
        self.random = random if random is not None else secrets.SystemRandom()

    @override
    def test(self, number: int, rounds: int | None = None) -> TestResult:
        if number < 0:
            msg = f'Expected a nonnegative number, but got: {number}'
            raise InvalidInputError(msg)
        if rounds is not None and rounds <= 0:
            msg = f'Rounds count should be positive, but got: {rounds}'
            raise InvalidInputError(msg)

        result = small_test(number)
        if result is not None:
            return result

        return self._run(number, log2(number) if rounds is None else rounds)

    # number is odd and above the small prime table here
    def _run(self, number: int, rounds: int) -> TestResult:
        raise NotImplementedError

    # uniform in [2, n - 2]
    def _witness(self, number: int) -> int:
        return self.random.randrange(2, number - 1)
