"""
프레임 처리 Service Layer
센서 콜백 1회 = on_frame 1회. 내부 스레드/큐 없음, 끝까지 실행 후 반환.
"""
import logging
from typing import Optional, Sequence

from skeleton_recorder.config.settings import settings
from skeleton_recorder.domain.angle.calculator import JointAngleComputer
from skeleton_recorder.domain.projection.projector import ScreenProjector
from skeleton_recorder.domain.record.recorder import FrameRecorder
from skeleton_recorder.domain.render.plan import SkeletonRenderPlan
from skeleton_recorder.infrastructure.render.opencv_canvas import RenderSink
from skeleton_recorder.presentation.overlay import OverlayLayout
from skeleton_recorder.schemas.angle_dto import AngleResult
from skeleton_recorder.schemas.frame_dto import Frame, SkeletonTrackingState
from skeleton_recorder.schemas.pipeline_dto import FrameResult

# ---------- 로거 ----------
logger = logging.getLogger(__name__)
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

_CLOCK_STATES = (SkeletonTrackingState.Tracked, SkeletonTrackingState.PositionOnly)


class FramePipeline:
    """
    프레임 처리 파이프라인

    책임:
    - 각도 계산 / 화면 투영 → 렌더 계획 → render sink
    - 각도 + 센서 좌표 → FrameRecorder → record sink
    - sink 실패는 그대로 호출자에게 전파 (재시도/버퍼링 없음)
    """

    def __init__(
        self,
        angle_computer: JointAngleComputer,
        projector: ScreenProjector,
        render_plan: SkeletonRenderPlan,
        render_sink: Optional[RenderSink] = None,
        recorder: Optional[FrameRecorder] = None,
        overlay: Optional[OverlayLayout] = None,
    ):
        """
        Args:
            angle_computer: 각도 계산기
            projector: 3D → 2D 변환기
            render_plan: 렌더 계획
            render_sink: 캔버스 (없으면 프리미티브만 반환)
            recorder: 프레임 기록기 (없으면 기록 안 함)
            overlay: 오버레이 텍스트 레이아웃 (없으면 텍스트 생략)
        """
        self.angle_computer = angle_computer
        self.projector = projector
        self.render_plan = render_plan
        self.render_sink = render_sink
        self.recorder = recorder
        self.overlay = overlay

    @property
    def recording(self) -> bool:
        return self.recorder is not None

    def disable_recording(self) -> None:
        if self.recorder is not None:
            logger.warning("⚠️ recording disabled for the rest of the session")
        self.recorder = None

    def on_frame(self, skeletons: Sequence[Frame]) -> FrameResult:
        """
        센서 1회 전달분 처리

        Process:
        1. 첫 추적 스켈레톤이면 기록 시계 시작
        2. Tracked 스켈레톤 각도 계산
        3. 렌더 계획 → render sink
        4. Tracked 스켈레톤마다 기록 1행
        """
        tracked = [f for f in skeletons if f.tracking_state == SkeletonTrackingState.Tracked]

        # ========== Step 1: 기록 시계 ==========
        if self.recorder is not None:
            for frame in skeletons:
                if frame.tracking_state in _CLOCK_STATES:
                    self.recorder.start_clock(frame.timestamp)
                    break

        # ========== Step 2: 각도 계산 ==========
        angles_by_frame: dict[int, list[AngleResult]] = {
            id(frame): self.angle_computer.compute(frame) for frame in tracked
        }

        # ========== Step 3: 렌더 ==========
        overlay_for = None
        if self.overlay is not None:
            overlay_for = lambda f: self.overlay.texts(f, angles_by_frame[id(f)])
        primitives = self.render_plan.build(skeletons, self.projector, overlay_for=overlay_for)
        if self.render_sink is not None:
            self.render_sink.draw(primitives)

        # ========== Step 4: 기록 ==========
        rows = []
        if self.recorder is not None:
            for frame in tracked:
                rows.append(self.recorder.record(frame, angles_by_frame[id(frame)]))

        return FrameResult(
            primitives=primitives,
            angles=[angles_by_frame[id(f)] for f in tracked],
            rows=rows,
        )
