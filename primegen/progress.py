from collections.abc import Callable
from types import TracebackType
from typing import Self

from tqdm import tqdm

# Receives (completed, total) after every finished task
ProgressObserver = Callable[[int, int], None]


class TqdmProgress:
    bar: tqdm

    def __init__(self, total: int, desc: str = 'primes'):
        self.bar = tqdm(total=total, desc=desc, unit='prime')

    def __call__(self, completed: int, total: int) -> None:
        self.bar.total = total
        self.bar.update(completed - self.bar.n)

    def close(self) -> None:
        self.bar.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
