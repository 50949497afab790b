"""
스켈레톤 렌더 계획 Domain Logic
프레임 + 투영 좌표 → 순서가 정해진 RenderPrimitive 리스트

출력 순서:
  배경 → (모든 스켈레톤의) 잘린 가장자리 → (스켈레톤마다) 뼈대 → 관절 → 오버레이 텍스트
  텍스트를 마지막에 두어 가려지지 않게 한다.
"""
from typing import Callable, Optional, Sequence

from skeleton_recorder.constants import Bone, BONES, RENDER_WIDTH, RENDER_HEIGHT
from skeleton_recorder.domain.projection.projector import ScreenProjector
from skeleton_recorder.schemas.frame_dto import (
    Frame,
    FrameEdge,
    JointSample,
    JointTrackingState,
    SkeletonTrackingState,
)
from skeleton_recorder.schemas.render_dto import (
    DEFAULT_RENDER_STYLE,
    Ellipse,
    Line,
    Point2D,
    Rectangle,
    RenderPrimitive,
    RenderStyle,
    StrokeStyle,
    Text,
)

OverlayFn = Callable[[Frame], Sequence[Text]]

# 그리기 순서: 아래 → 위 → 왼쪽 → 오른쪽
_EDGE_ORDER = (FrameEdge.Bottom, FrameEdge.Top, FrameEdge.Left, FrameEdge.Right)


class SkeletonRenderPlan:
    """호출 간 상태 없음. 같은 입력이면 같은 프리미티브 리스트"""

    def __init__(
        self,
        bones: Sequence[Bone] = BONES,
        style: RenderStyle = DEFAULT_RENDER_STYLE,
        width: float = RENDER_WIDTH,
        height: float = RENDER_HEIGHT,
    ):
        self.bones = tuple(bones)
        self.style = style
        self.width = width
        self.height = height

    def build(
        self,
        skeletons: Sequence[Frame],
        projector: ScreenProjector,
        overlay_for: Optional[OverlayFn] = None,
    ) -> list[RenderPrimitive]:
        """
        센서 1회 전달분(스켈레톤 0~N명)의 그리기 목록 생성

        Args:
            skeletons: 스켈레톤별 프레임 (전달 순서 유지)
            projector: 3D → 2D 변환기
            overlay_for: Tracked 스켈레톤에 붙일 텍스트 생성 함수 (레이아웃은 presentation 책임)

        Returns:
            RenderPrimitive 리스트
        """
        primitives: list[RenderPrimitive] = [self.background()]
        for frame in skeletons:
            primitives.extend(self.clip_edges(frame))

        # 가장자리 띠는 모든 스켈레톤 몸체보다 먼저
        for frame in skeletons:
            if frame.tracking_state == SkeletonTrackingState.Tracked:
                primitives.extend(self.bones_and_joints(frame, projector))
                if overlay_for is not None:
                    primitives.extend(overlay_for(frame))
            elif frame.tracking_state == SkeletonTrackingState.PositionOnly:
                primitives.append(self.body_center(frame, projector))
        return primitives

    def background(self) -> Rectangle:
        return Rectangle(x=0.0, y=0.0, width=self.width, height=self.height, fill=self.style.background)

    def clip_edges(self, frame: Frame) -> list[Rectangle]:
        """잘린 가장자리마다 10px 두께 띠 (추적 상태와 무관)"""
        t = self.style.clip_edge_thickness
        w, h = self.width, self.height
        strips = {
            FrameEdge.Bottom: (0.0, h - t, w, t),
            FrameEdge.Top: (0.0, 0.0, w, t),
            FrameEdge.Left: (0.0, 0.0, t, h),
            FrameEdge.Right: (w - t, 0.0, t, h),
        }
        rects = []
        for edge in _EDGE_ORDER:
            if edge in frame.clipped_edges:
                x, y, rw, rh = strips[edge]
                rects.append(Rectangle(x=x, y=y, width=rw, height=rh, fill=self.style.clip_edge_fill))
        return rects

    def body_center(self, frame: Frame, projector: ScreenProjector) -> Ellipse:
        r = self.style.center_point_radius
        return Ellipse(center=projector.project(frame.position), radius_x=r, radius_y=r,
                       fill=self.style.center_point_fill)

    def bones_and_joints(self, frame: Frame, projector: ScreenProjector) -> list[RenderPrimitive]:
        points = projector.project_frame(frame)
        out: list[RenderPrimitive] = []

        # 뼈대 먼저
        for bone in self.bones:
            line = self._bone_line(frame.joint(bone.start), frame.joint(bone.end), points)
            if line is not None:
                out.append(line)

        # 관절
        for sample in frame.joints:
            ellipse = self._joint_ellipse(sample, points[sample.joint])
            if ellipse is not None:
                out.append(ellipse)
        return out

    def bone_stroke(self, start: JointSample, end: JointSample) -> Optional[StrokeStyle]:
        """
        뼈대 규칙
        - 한쪽이라도 NotTracked → 그리지 않음
        - 양쪽 모두 Inferred → 그리지 않음
        - 양쪽 모두 Tracked 일 때만 confident, 나머지는 tentative
        """
        s0, s1 = start.tracking_state, end.tracking_state
        if JointTrackingState.NotTracked in (s0, s1):
            return None
        if s0 == JointTrackingState.Inferred and s1 == JointTrackingState.Inferred:
            return None
        if s0 == JointTrackingState.Tracked and s1 == JointTrackingState.Tracked:
            return self.style.confident_bone
        return self.style.tentative_bone

    def _bone_line(self, start: JointSample, end: JointSample, points: dict) -> Optional[Line]:
        stroke = self.bone_stroke(start, end)
        if stroke is None:
            return None
        return Line(start=points[start.joint], end=points[end.joint], stroke=stroke)

    def _joint_ellipse(self, sample: JointSample, point: Point2D) -> Optional[Ellipse]:
        if sample.tracking_state == JointTrackingState.Tracked:
            fill = self.style.tracked_joint_fill
        elif sample.tracking_state == JointTrackingState.Inferred:
            fill = self.style.inferred_joint_fill
        else:
            return None
        r = self.style.joint_radius
        return Ellipse(center=point, radius_x=r, radius_y=r, fill=fill)
