"""
센서 없이(기록 재생 등) 쓰는 명목 좌표 매퍼
Kinect v1 depth 카메라 640x480 명목 내부 파라미터로 원근 투영한다.
실제 센서 캘리브레이션을 대체하지 않음.
"""
from skeleton_recorder.constants import NOMINAL_DEPTH_FOCAL_PX, RENDER_WIDTH, RENDER_HEIGHT
from skeleton_recorder.schemas.frame_dto import Vector3

_EPS = 1e-7


class NominalDepthMapper:
    """px = cx + X·f/Z, py = cy − Y·f/Z (센서 y축은 위쪽이 +)"""

    def __init__(
        self,
        focal_px: float = NOMINAL_DEPTH_FOCAL_PX,
        width: float = RENDER_WIDTH,
        height: float = RENDER_HEIGHT,
    ):
        self.focal_px = focal_px
        self.cx = width / 2.0
        self.cy = height / 2.0

    def map_skeleton_point(self, position: Vector3) -> tuple[float, float]:
        # 센서 뒤쪽/원점은 투영 불가 → (0, 0)
        if position.z <= _EPS:
            return 0.0, 0.0
        px = self.cx + position.x * self.focal_px / position.z
        py = self.cy - position.y * self.focal_px / position.z
        return px, py
