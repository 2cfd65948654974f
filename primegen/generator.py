import logging
import secrets
from dataclasses import dataclass

from primality import PrimalityTest

from .errors import InvalidInputError
from .fermat import Fermat
from .miller_rabin import MillerRabin
from .probabilistic import ProbabilisticTest, RandomSource

logger = logging.getLogger(__name__)

TESTS: dict[str, type[ProbabilisticTest]] = {
    MillerRabin.name: MillerRabin,
    Fermat.name: Fermat,
}
DEFAULT_METHOD = MillerRabin.name


@dataclass
class SearchStats:
    candidates: int = 0
    discarded: int = 0


def make_test(test: PrimalityTest | str, random: RandomSource) -> PrimalityTest:
    if isinstance(test, PrimalityTest):
        return test
    if test not in TESTS:
        msg = f'Unknown primality test: {test!r}, expected one of {sorted(TESTS)}'
        raise InvalidInputError(msg)
    return TESTS[test](random)


# Both the highest bit (exact length) and the lowest bit (oddness) are forced
def random_odd(bits: int, random: RandomSource) -> int:
    return random.getrandbits(bits) | (1 << (bits - 1)) | 1


def generate_prime(
    bits: int,
    test: PrimalityTest | str = DEFAULT_METHOD,
    random: RandomSource | None = None,
    rounds: int | None = None,
    stats: SearchStats | None = None,
) -> int:
    # the only 1 bit odd number is 1, which is not a prime
    if bits < 2:  # noqa: PLR2004
        msg = f'Bit length should be at least 2, but got: {bits}'
        raise InvalidInputError(msg)

    random = random if random is not None else secrets.SystemRandom()
    tester = make_test(test, random)

    # expected number of draws is about ln(2) * bits / 2
    draws = 0
    while True:
        x = random_odd(bits, random)
        draws += 1
        if stats is not None:
            stats.candidates += 1

        if tester.test(x, rounds).passed:
            logger.debug('Found %d bit prime after %d draws', bits, draws)
            return x

        if stats is not None:
            stats.discarded += 1
