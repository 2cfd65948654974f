from random import Random

import pytest
from Crypto.Util.number import isPrime
from ecdsa.numbertheory import is_prime as ecdsa_is_prime

from ..errors import InvalidInputError
from ..fermat import Fermat
from ..generator import SearchStats, generate_prime, random_odd


def test_random_odd() -> None:
    random = Random(1)
    for bits in range(1, 200):
        for _ in range(10):
            x = random_odd(bits, random)
            assert x.bit_length() == bits
            assert x % 2 == 1


def test_generator() -> None:
    random = Random(1337)
    for bits in (2, 3, 4, 8, 9, 16, 31, 32, 64, 100, 128, 256, 512):
        p = generate_prime(bits, random=random)
        assert p.bit_length() == bits
        assert p % 2 == 1
        assert isPrime(p)
        assert ecdsa_is_prime(p)


def test_generator_default_random() -> None:
    for _ in range(20):
        p = generate_prime(48)
        assert p.bit_length() == 48  # noqa: PLR2004
        assert isPrime(p)


def test_tiny_primes() -> None:
    assert generate_prime(2) == 3  # noqa: PLR2004
    assert generate_prime(3) in (5, 7)
    assert generate_prime(4) in (11, 13)


def test_fermat_generator() -> None:
    random = Random(7)
    for _ in range(10):
        p = generate_prime(128, 'fermat', random)
        assert p.bit_length() == 128  # noqa: PLR2004
        assert isPrime(p)

    p = generate_prime(64, Fermat(random), rounds=10)
    assert isPrime(p)


def test_reproducible() -> None:
    assert generate_prime(256, random=Random(99)) == generate_prime(256, random=Random(99))


def test_stats() -> None:
    stats = SearchStats()
    generate_prime(512, random=Random(5), stats=stats)
    assert stats.candidates >= 1
    assert stats.discarded == stats.candidates - 1

    generate_prime(512, random=Random(6), stats=stats)
    assert stats.discarded == stats.candidates - 2


def test_invalid() -> None:
    with pytest.raises(InvalidInputError):
        generate_prime(0)
    with pytest.raises(InvalidInputError):
        generate_prime(1)
    with pytest.raises(InvalidInputError):
        generate_prime(16, 'aks')
    with pytest.raises(InvalidInputError):
        generate_prime(16, rounds=0)
