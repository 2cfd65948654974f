from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Protocol, Self, TextIO, override


class LineSink(Protocol):
    def append_line(self, line: str) -> None: ...


class StreamSink(LineSink):
    stream: TextIO

    def __init__(self, stream: TextIO):
        self.stream = stream

    @override
    def append_line(self, line: str) -> None:
        self.stream.write(line + '\n')
        self.stream.flush()


# Truncates the file on open. Unbuffered, so a line that failed to be written
# never reaches the file later and closing after a failure does not raise again
class FileSink(LineSink):
    path: Path
    file: BinaryIO

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.file = self.path.open('wb', buffering=0)

    @override
    def append_line(self, line: str) -> None:
        self.file.write((line + '\n').encode())

    def close(self) -> None:
        self.file.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class ListSink(LineSink):
    lines: list[str]

    def __init__(self) -> None:
        self.lines = []

    @override
    def append_line(self, line: str) -> None:
        self.lines.append(line)
