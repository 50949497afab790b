"""
3D → 2D 화면 좌표 변환
좌표 매핑 자체(센서 캘리브레이션)는 외부 CoordinateMapper 에 위임한다.
"""
import logging
from typing import Protocol

from skeleton_recorder.constants import JointType, RENDER_WIDTH, RENDER_HEIGHT
from skeleton_recorder.schemas.frame_dto import Frame, JointSample, Vector3
from skeleton_recorder.schemas.render_dto import Point2D

logger = logging.getLogger(__name__)


class CoordinateMapper(Protocol):
    """센서가 제공하는 skeleton point → depth image point 매핑"""

    def map_skeleton_point(self, position: Vector3) -> tuple[float, float]:
        ...


class ScreenProjector:
    """센서 좌표를 640x480 렌더 공간의 점으로 변환 (클램핑 없음)"""

    def __init__(
        self,
        mapper: CoordinateMapper,
        width: float = RENDER_WIDTH,
        height: float = RENDER_HEIGHT,
    ):
        self.mapper = mapper
        self.width = width
        self.height = height

    def project(self, position: Vector3) -> Point2D:
        x, y = self.mapper.map_skeleton_point(position)
        return Point2D(x=float(x), y=float(y))

    def project_joint(self, sample: JointSample) -> Point2D:
        return self.project(sample.position)

    def project_frame(self, frame: Frame) -> dict[JointType, Point2D]:
        """프레임의 모든 관절을 한 번씩만 투영. 화면 밖 관절은 DEBUG 로그만 남긴다"""
        points = {s.joint: self.project_joint(s) for s in frame.joints}
        if logger.isEnabledFor(logging.DEBUG):
            outside = [jt.value for jt, p in points.items() if not self.is_inside(p)]
            if outside:
                logger.debug(f"joints outside render area: {', '.join(outside)}")
        return points

    def is_inside(self, point: Point2D) -> bool:
        """점이 렌더 영역 안에 있는지"""
        return 0.0 <= point.x <= self.width and 0.0 <= point.y <= self.height
