from enum import Enum


class TestResult(Enum):
    ONE = 'one'
    COMPOSITE = 'composite'
    PRIME = 'prime'
    PROBABLY_PRIME = 'probably prime'

    @property
    def passed(self) -> bool:
        return self in (TestResult.PRIME, TestResult.PROBABLY_PRIME)


class PrimalityTest:
    name: str

    def test(self, number: int, rounds: int | None = None) -> TestResult:
        raise NotImplementedError
