from pathlib import Path
from typing import Optional

from skeleton_recorder.config.settings import settings
from skeleton_recorder.domain.angle.calculator import JointAngleComputer
from skeleton_recorder.domain.projection.projector import CoordinateMapper, ScreenProjector
from skeleton_recorder.domain.record.recorder import FrameRecorder
from skeleton_recorder.domain.render.plan import SkeletonRenderPlan
from skeleton_recorder.infrastructure.render.opencv_canvas import RenderSink
from skeleton_recorder.infrastructure.storage.record_sink import FileRecordSink
from skeleton_recorder.presentation.overlay import OverlayLayout
from skeleton_recorder.services.frame_pipeline import FramePipeline
from skeleton_recorder.services.tracking_session import SkeletonSensor, TrackingSession


def create_frame_pipeline(
        mapper: CoordinateMapper,
        render_sink: Optional[RenderSink] = None,
        record_sink: Optional[FileRecordSink] = None,
        overlay: Optional[bool] = None,
) -> FramePipeline:
    """
    FramePipeline 인스턴스 생성

    Args:
        mapper: 센서 좌표 매퍼
        render_sink: 캔버스 (선택적)
        record_sink: 기록 파일 (없으면 기록 안 함)
        overlay: 오버레이 텍스트 사용 여부 (None 이면 settings)

    Returns:
        FramePipeline 인스턴스
    """
    if overlay is None:
        overlay = settings.OVERLAY_ENABLED

    return FramePipeline(
        angle_computer=JointAngleComputer(),
        projector=ScreenProjector(mapper),
        render_plan=SkeletonRenderPlan(),
        render_sink=render_sink,
        recorder=FrameRecorder(record_sink) if record_sink is not None else None,
        overlay=OverlayLayout() if overlay else None,
    )


def create_tracking_session(
        sensor: Optional[SkeletonSensor],
        mapper: CoordinateMapper,
        render_sink: Optional[RenderSink] = None,
        record_path: Optional[Path] = None,
) -> TrackingSession:
    """
    settings 기준으로 TrackingSession 구성

    Args:
        sensor: 이미 연결된 센서 (없으면 NO_SENSOR 세션)
        mapper: 센서 좌표 매퍼
        render_sink: 캔버스
        record_path: 기록 파일 경로 (None 이면 settings.RECORD_PATH)
    """
    record_sink = None
    if settings.RECORD_ENABLED:
        record_sink = FileRecordSink(record_path or settings.RECORD_PATH)

    pipeline = create_frame_pipeline(mapper, render_sink=render_sink, record_sink=record_sink)
    return TrackingSession(
        sensor=sensor,
        pipeline=pipeline,
        record_sink=record_sink,
        append=settings.RECORD_APPEND,
        banner=settings.RECORD_SESSION_BANNER,
        seated=settings.SEATED_MODE,
    )
