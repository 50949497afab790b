"""
추적 세션 (시작/정지 라이프사이클)
창 열림 → start(), 창 닫힘 → stop() 에 해당. 센서 탐색은 하지 않는다.
"""
import logging
from enum import Enum
from typing import Optional, Protocol, Sequence

from skeleton_recorder.domain.record.recorder import RecordSinkError
from skeleton_recorder.infrastructure.storage.record_sink import FileRecordSink
from skeleton_recorder.schemas.frame_dto import Frame
from skeleton_recorder.schemas.pipeline_dto import FrameResult
from skeleton_recorder.services.frame_pipeline import FramePipeline

logger = logging.getLogger(__name__)


class TrackingMode(str, Enum):
    Default = "Default"
    Seated = "Seated"


class SessionStatus(str, Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    NO_SENSOR = "NO_SENSOR"
    RECORDING_DISABLED = "RECORDING_DISABLED"
    STOPPED = "STOPPED"


class SkeletonSensor(Protocol):
    """이미 선택된 센서. start 실패 시 OSError"""

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def set_tracking_mode(self, mode: TrackingMode) -> None:
        ...


class TrackingSession:
    """센서 ↔ 파이프라인 연결 + sink 실패 시 기능 비활성화 결정"""

    def __init__(
        self,
        sensor: Optional[SkeletonSensor],
        pipeline: FramePipeline,
        record_sink: Optional[FileRecordSink] = None,
        append: bool = True,
        banner: bool = True,
        seated: bool = False,
    ):
        self.sensor = sensor
        self.pipeline = pipeline
        self.record_sink = record_sink
        self.append = append
        self.banner = banner
        self.seated = seated
        self.status = SessionStatus.IDLE

    @property
    def running(self) -> bool:
        return self.status in (SessionStatus.RUNNING, SessionStatus.RECORDING_DISABLED)

    def start(self) -> SessionStatus:
        if self.sensor is None:
            logger.warning("⚠️ no sensor ready")
            self.status = SessionStatus.NO_SENSOR
            return self.status

        self.sensor.set_tracking_mode(TrackingMode.Seated if self.seated else TrackingMode.Default)
        try:
            self.sensor.start()
        except OSError as e:
            logger.warning(f"⚠️ sensor failed to start: {e}")
            self.sensor = None
            self.status = SessionStatus.NO_SENSOR
            return self.status

        self.status = SessionStatus.RUNNING
        if self.pipeline.recorder is not None:
            self.pipeline.recorder.reset()
        self._prepare_record_file()
        logger.info(f"🚀 tracking session started (recording={self.pipeline.recording})")
        return self.status

    def stop(self) -> None:
        if self.sensor is not None:
            self.sensor.stop()
        if self.status != SessionStatus.NO_SENSOR:
            self.status = SessionStatus.STOPPED
        logger.info("tracking session stopped")

    def set_seated_mode(self, seated: bool) -> None:
        """좌식 모드 토글 (상체 관절만 추적)"""
        self.seated = seated
        if self.sensor is not None:
            self.sensor.set_tracking_mode(TrackingMode.Seated if seated else TrackingMode.Default)

    def handle_frame(self, skeletons: Sequence[Frame]) -> Optional[FrameResult]:
        """센서 콜백. 세션이 돌고 있지 않으면 무시"""
        if not self.running:
            return None
        try:
            return self.pipeline.on_frame(skeletons)
        except RecordSinkError:
            logger.error("❌ record sink failed, disabling recording", exc_info=True)
            self._disable_recording()
            return None

    def _prepare_record_file(self) -> None:
        if self.record_sink is None or not self.pipeline.recording:
            return
        try:
            if not self.append:
                self.record_sink.truncate()
            if self.banner:
                self.pipeline.recorder.write_banner()
        except RecordSinkError:
            logger.error("❌ record file not writable, disabling recording", exc_info=True)
            self._disable_recording()

    def _disable_recording(self) -> None:
        self.pipeline.disable_recording()
        self.status = SessionStatus.RECORDING_DISABLED
