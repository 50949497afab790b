"""
각도 계산 Domain Logic
프레임 관절 위치 → 고정 8개 관절 각도
"""
from typing import Sequence

from skeleton_recorder.constants import AngleSpec, ANGLE_SPECS
from skeleton_recorder.domain.geometry.kernel import angle_between
from skeleton_recorder.schemas.angle_dto import AngleResult
from skeleton_recorder.schemas.frame_dto import Frame


class JointAngleComputer:
    """관절 각도 계산기 (부수효과 없음)"""

    def __init__(self, angle_specs: Sequence[AngleSpec] = ANGLE_SPECS):
        self.angle_specs = tuple(angle_specs)

    def compute(self, frame: Frame) -> list[AngleResult]:
        """
        AngleSpec 테이블 순서대로 각도 계산

        Args:
            frame: 스켈레톤 1프레임

        Returns:
            AngleResult 리스트 (spec 개수와 동일, 순서 고정 = 기록 컬럼 순서)
        """
        results = []
        for spec in self.angle_specs:
            degrees = angle_between(
                frame.joint(spec.vertex).position,
                frame.joint(spec.ray_a).position,
                frame.joint(spec.ray_b).position,
            )
            results.append(AngleResult(name=spec.name, column=spec.column, degrees=degrees))
        return results

    @staticmethod
    def as_dict(results: Sequence[AngleResult]) -> dict[str, float]:
        """컬럼 라벨 → 각도 매핑"""
        return {r.column: r.degrees for r in results}
