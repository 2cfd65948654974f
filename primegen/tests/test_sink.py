import io
from pathlib import Path

import pytest

from ..sink import FileSink, ListSink, StreamSink


def test_list_sink() -> None:
    sink = ListSink()
    sink.append_line('3')
    sink.append_line('5')
    assert sink.lines == ['3', '5']


def test_stream_sink() -> None:
    stream = io.StringIO()
    sink = StreamSink(stream)
    sink.append_line('7')
    sink.append_line('11')
    assert stream.getvalue() == '7\n11\n'


def test_file_sink(tmp_path: Path) -> None:
    path = tmp_path / 'output.txt'
    path.write_text('old content\n')

    with FileSink(path) as sink:
        sink.append_line('13')
        sink.append_line('17')

    assert path.read_text() == '13\n17\n'
    assert sink.file.closed


@pytest.mark.skipif(not Path('/dev/full').exists(), reason='needs /dev/full')
def test_file_sink_failed_write() -> None:
    sink = FileSink('/dev/full')
    with pytest.raises(OSError):  # noqa: PT011
        sink.append_line('19')
    with pytest.raises(OSError):  # noqa: PT011
        sink.append_line('23')

    # nothing is left to flush
    sink.close()
    assert sink.file.closed
