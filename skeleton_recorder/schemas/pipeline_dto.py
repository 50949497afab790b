"""
파이프라인 출력 DTO
센서 1회 전달분 처리 결과 (렌더 목록 + 각도 + 기록 행)
"""
from pydantic import BaseModel, Field

from skeleton_recorder.schemas.angle_dto import AngleResult
from skeleton_recorder.schemas.render_dto import RenderPrimitive


class FrameResult(BaseModel):
    primitives: list[RenderPrimitive] = Field(default_factory=list, description="렌더 sink 로 보낸 프리미티브")
    angles: list[list[AngleResult]] = Field(default_factory=list, description="Tracked 스켈레톤별 각도 8개")
    rows: list[str] = Field(default_factory=list, description="기록한 데이터 행")
