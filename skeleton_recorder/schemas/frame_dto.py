"""
센서 프레임 관련 DTO
센서 콜백 → 파이프라인 입력용 (프레임 단위로 생성, 처리 후 폐기)
"""
from enum import Enum
from typing import Mapping, Optional

import numpy as np
from pydantic import BaseModel, Field, validator

from skeleton_recorder.constants import JointType, JOINT_ORDER

_JOINT_INDEX = {jt: i for i, jt in enumerate(JOINT_ORDER)}


class JointTrackingState(str, Enum):
    Tracked = "Tracked"
    Inferred = "Inferred"
    NotTracked = "NotTracked"


class SkeletonTrackingState(str, Enum):
    Tracked = "Tracked"
    PositionOnly = "PositionOnly"
    NotTracked = "NotTracked"


class FrameEdge(str, Enum):
    """스켈레톤이 센서 시야 밖으로 잘린 방향"""
    Top = "Top"
    Bottom = "Bottom"
    Left = "Left"
    Right = "Right"


class Vector3(BaseModel):
    """센서 좌표계 3D 위치 (미터)"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    class Config:
        frozen = True

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


class JointSample(BaseModel):
    """관절 1개의 위치 + 추적 신뢰도"""
    joint: JointType
    position: Vector3
    tracking_state: JointTrackingState = JointTrackingState.Tracked

    class Config:
        frozen = True


class Frame(BaseModel):
    """스켈레톤 1명의 1프레임 데이터 (20개 관절 전부 포함)"""
    joints: tuple[JointSample, ...] = Field(..., description="JointType 선언 순서로 정렬된 관절 20개")
    tracking_state: SkeletonTrackingState = SkeletonTrackingState.Tracked
    clipped_edges: frozenset[FrameEdge] = Field(default_factory=frozenset, description="잘린 화면 가장자리")
    position: Vector3 = Field(default_factory=Vector3, description="몸 중심 위치 (PositionOnly 렌더링용)")
    timestamp: float = Field(0.0, description="호스트가 준 단조 증가 캡처 시각(초)")

    class Config:
        frozen = True

    @validator("joints")
    def validate_joint_coverage(cls, v):
        """관절 집합이 고정 20개와 정확히 일치해야 한다 (중복/누락 불가)"""
        seen = [s.joint for s in v]
        if len(seen) != len(set(seen)):
            raise ValueError("duplicate joint identity in frame")
        missing = set(JOINT_ORDER) - set(seen)
        if missing:
            names = ", ".join(sorted(j.value for j in missing))
            raise ValueError(f"frame is missing joints: {names}")
        return tuple(sorted(v, key=lambda s: _JOINT_INDEX[s.joint]))

    def joint(self, joint_type: JointType) -> JointSample:
        """JointType 으로 관절 샘플 접근"""
        return self.joints[_JOINT_INDEX[joint_type]]

    @classmethod
    def from_positions(
        cls,
        positions: Mapping[JointType, tuple[float, float, float]],
        joint_state: JointTrackingState = JointTrackingState.Tracked,
        timestamp: float = 0.0,
        tracking_state: SkeletonTrackingState = SkeletonTrackingState.Tracked,
        clipped_edges: Optional[frozenset] = None,
    ) -> "Frame":
        """관절별 (x, y, z) 좌표만으로 프레임 생성 (기록 재생/테스트용)"""
        joints = tuple(
            JointSample(
                joint=jt,
                position=Vector3(x=positions[jt][0], y=positions[jt][1], z=positions[jt][2]),
                tracking_state=joint_state,
            )
            for jt in JOINT_ORDER
        )
        center = positions[JointType.HipCenter]
        return cls(
            joints=joints,
            tracking_state=tracking_state,
            clipped_edges=clipped_edges or frozenset(),
            position=Vector3(x=center[0], y=center[1], z=center[2]),
            timestamp=timestamp,
        )
