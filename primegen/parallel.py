import logging
import secrets
import threading
from concurrent.futures import Executor, Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from random import Random

from .errors import InvalidInputError, SinkWriteError
from .generator import DEFAULT_METHOD, TESTS, generate_prime
from .progress import ProgressObserver
from .sink import LineSink

logger = logging.getLogger(__name__)


@dataclass
class BatchReport:
    requested: int
    written: int = 0
    failed: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed and self.written == self.requested


# Runs inside a worker process, so every task owns its random source
def _generate_task(bits: int, method: str, rounds: int | None, seed: int | None) -> int:
    random = secrets.SystemRandom() if seed is None else Random(seed)
    return generate_prime(bits, method, random, rounds)


def _task_seeds(count: int, seed: int | None) -> list[int | None]:
    if seed is None:
        return [None] * count
    seeder = Random(seed)
    return [seeder.getrandbits(64) for _ in range(count)]


def _validate(bits: int, count: int, method: str, rounds: int | None) -> None:
    if bits < 2:  # noqa: PLR2004
        msg = f'Bit length should be at least 2, but got: {bits}'
        raise InvalidInputError(msg)
    if count <= 0:
        msg = f'Count should be positive, but got: {count}'
        raise InvalidInputError(msg)
    if method not in TESTS:
        msg = f'Unknown primality test: {method!r}, expected one of {sorted(TESTS)}'
        raise InvalidInputError(msg)
    if rounds is not None and rounds <= 0:
        msg = f'Rounds count should be positive, but got: {rounds}'
        raise InvalidInputError(msg)


def _cancel(futures: dict[Future[int], int]) -> None:
    for future in futures:
        future.cancel()


# ProcessPoolExecutor has no public way to stop running tasks before Python 3.14
def _terminate(pool: ProcessPoolExecutor) -> None:
    processes = list((pool._processes or {}).values())  # noqa: SLF001
    pool.shutdown(wait=False, cancel_futures=True)
    for process in processes:
        process.terminate()


def generate_primes(  # noqa: PLR0913
    bits: int,
    count: int,
    sink: LineSink,
    progress: ProgressObserver | None = None,
    method: str = DEFAULT_METHOD,
    rounds: int | None = None,
    workers: int | None = None,
    seed: int | None = None,
    executor: Executor | None = None,
    *,
    isolate_failures: bool = True,
) -> BatchReport:
    """
    Generates `count` primes of `bits` bits each in parallel and appends them
    to `sink` as decimal lines, in completion order.

    A failed write is recorded in the report and the other tasks go on, unless
    `isolate_failures` is False, then the batch is cancelled and SinkWriteError
    is raised. Worker processes still running are terminated when the batch is
    aborted this way or interrupted. Passing `seed` makes the set of generated primes reproducible.
    """
    _validate(bits, count, method, rounds)

    owned = executor is None
    pool = ProcessPoolExecutor(max_workers=workers) if executor is None else executor
    lock = threading.Lock()
    report = BatchReport(count)
    logger.info('Generating %d primes of %d bits using %s', count, bits, method)

    futures: dict[Future[int], int] = {}
    aborted = False
    try:
        futures = {
            pool.submit(_generate_task, bits, method, rounds, task_seed): index
            for index, task_seed in enumerate(_task_seeds(count, seed))
        }

        for completed, future in enumerate(as_completed(futures), 1):
            index = futures[future]
            prime = future.result()
            try:
                with lock:
                    sink.append_line(str(prime))
            except OSError as e:
                error = SinkWriteError(index, e)
                if not isolate_failures:
                    aborted = True
                    _cancel(futures)
                    raise error from e
                logger.warning('%s', error)
                report.failed.append(index)
            else:
                report.written += 1

            if progress is not None:
                progress(completed, count)
    except KeyboardInterrupt:
        logger.warning('Interrupted, abandoning the remaining tasks')
        aborted = True
        _cancel(futures)
        raise
    finally:
        if owned and aborted and isinstance(pool, ProcessPoolExecutor):
            _terminate(pool)
        elif owned:
            pool.shutdown(wait=False, cancel_futures=True)

    report.failed.sort()
    logger.info('Wrote %d of %d primes, %d failed', report.written, count, len(report.failed))
    return report
