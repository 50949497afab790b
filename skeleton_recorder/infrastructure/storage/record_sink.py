"""
파일 기반 RecordSink
호출마다 열기 → 추가 → 닫기. 열린 핸들을 프레임 간에 유지하지 않는다.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO, Union

from skeleton_recorder.domain.record.recorder import RecordSinkError

logger = logging.getLogger(__name__)


class FileRecordSink:
    """CSV 기록 파일 (append 모드)"""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @contextmanager
    def open_for_append(self) -> Iterator[TextIO]:
        """
        scoped acquisition: 예외가 나도 flush/close 보장.
        OSError 는 RecordSinkError 로 감싸서 올린다.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            f = self.path.open("a", encoding=self.encoding, newline="")
        except OSError as e:
            logger.error(f"❌ record sink unavailable: {self.path} ({e})")
            raise RecordSinkError(f"cannot open record file: {self.path}") from e
        try:
            yield f
            f.flush()
        except OSError as e:
            logger.error(f"❌ record write failed: {self.path} ({e})")
            raise RecordSinkError(f"cannot write record file: {self.path}") from e
        finally:
            f.close()

    def append(self, text: str) -> None:
        with self.open_for_append() as f:
            f.write(text)

    def truncate(self) -> None:
        """세션 시작 시 기존 기록 비우기 (RECORD_APPEND=false)"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("", encoding=self.encoding)
        except OSError as e:
            logger.error(f"❌ record truncate failed: {self.path} ({e})")
            raise RecordSinkError(f"cannot truncate record file: {self.path}") from e
        logger.info(f"🗑️ record file truncated: {self.path}")
