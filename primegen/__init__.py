from .bits import log2
from .errors import ArithmeticPreconditionError, InvalidInputError, SinkWriteError
from .fermat import Fermat
from .generator import SearchStats, generate_prime
from .miller_rabin import MillerRabin
from .parallel import BatchReport, generate_primes
from .sink import FileSink, ListSink, StreamSink
from .small_primes import SMALL_PRIMES

__all__ = [
    'SMALL_PRIMES',
    'ArithmeticPreconditionError',
    'BatchReport',
    'Fermat',
    'FileSink',
    'InvalidInputError',
    'ListSink',
    'MillerRabin',
    'SearchStats',
    'SinkWriteError',
    'StreamSink',
    'generate_prime',
    'generate_primes',
    'log2',
]
