# tests/unit/test_record_sink.py
import pytest

from skeleton_recorder.domain.record.recorder import RecordSinkError
from skeleton_recorder.infrastructure.storage.record_sink import FileRecordSink


def test_append_creates_parent_dirs(tmp_path):
    path = tmp_path / "nested" / "dir" / "rec.csv"
    sink = FileRecordSink(path)
    sink.append("a,b\n")
    sink.append("c,d\n")
    assert path.read_text(encoding="utf-8") == "a,b\nc,d\n"


def test_append_keeps_existing_content(tmp_path):
    path = tmp_path / "rec.csv"
    path.write_text("old\n", encoding="utf-8")
    FileRecordSink(path).append("new\n")
    assert path.read_text(encoding="utf-8") == "old\nnew\n"


def test_truncate(tmp_path):
    path = tmp_path / "rec.csv"
    path.write_text("old\n", encoding="utf-8")
    sink = FileRecordSink(path)
    sink.truncate()
    assert path.read_text(encoding="utf-8") == ""
    sink.append("x\n")
    assert path.read_text(encoding="utf-8") == "x\n"


def test_unwritable_path_raises_sink_error(tmp_path):
    """부모 경로가 파일이면 디렉토리를 만들 수 없다"""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    sink = FileRecordSink(blocker / "rec.csv")

    with pytest.raises(RecordSinkError) as exc:
        sink.append("x\n")
    assert isinstance(exc.value.__cause__, OSError)

    with pytest.raises(RecordSinkError):
        sink.truncate()


def test_directory_as_record_path_raises(tmp_path):
    with pytest.raises(RecordSinkError):
        FileRecordSink(tmp_path).append("x\n")
