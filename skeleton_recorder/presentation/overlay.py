"""
오버레이 텍스트 레이아웃 (presentation 계층)
관절 좌표 덤프 + 각도 라벨을 Text 프리미티브로 배치한다.
코어(렌더 계획)는 위치 계산을 모르고, 이 객체가 돌려준 Text 를 마지막에 붙이기만 한다.
"""
from typing import Sequence

from skeleton_recorder.constants import SHORT_NAME_JOINTS
from skeleton_recorder.schemas.angle_dto import AngleResult
from skeleton_recorder.schemas.frame_dto import Frame, JointTrackingState
from skeleton_recorder.schemas.render_dto import Point2D, Text


class OverlayLayout:
    """좌상단 (10, 10) 부터 15px 간격으로 한 줄씩"""

    def __init__(
        self,
        origin_x: float = 10.0,
        origin_y: float = 10.0,
        line_height: float = 15.0,
        angle_x: float = 20.0,
    ):
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.line_height = line_height
        self.angle_x = angle_x

    def texts(self, frame: Frame, angles: Sequence[AngleResult]) -> list[Text]:
        """
        1) 컬럼 헤더
        2) 그려지는(Tracked/Inferred) 관절마다 '이름 x y z'
        3) 한 줄 띄우고 각도 8줄 (오른쪽 그룹 → 왼쪽 그룹)
        """
        y = self.origin_y
        out = [Text(text="\t\tx\ty\tz", position=Point2D(x=self.origin_x, y=y))]
        y += self.line_height

        for sample in frame.joints:
            if sample.tracking_state == JointTrackingState.NotTracked:
                continue
            p = sample.position
            sep = "\t\t" if sample.joint in SHORT_NAME_JOINTS else "\t"
            line = f"{sample.joint.value}{sep}{p.x:.4f}\t{p.y:.4f}\t{p.z:.4f}"
            out.append(Text(text=line, position=Point2D(x=self.origin_x, y=y)))
            y += self.line_height

        y += self.line_height
        for result in _right_first(angles):
            out.append(Text(text=f"{result.name}: {result.degrees:.4f}",
                            position=Point2D(x=self.angle_x, y=y)))
            y += self.line_height
        return out


def _right_first(angles: Sequence[AngleResult]) -> list[AngleResult]:
    right = [a for a in angles if a.column.startswith("R_")]
    others = [a for a in angles if not a.column.startswith("R_")]
    return right + others
