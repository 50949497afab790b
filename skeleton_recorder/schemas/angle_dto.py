"""
각도 계산 관련 DTO
JointAngleComputer 출력용
"""
from pydantic import BaseModel, Field


class AngleResult(BaseModel):
    """AngleSpec 1개의 계산 결과"""
    name: str = Field(..., description="표시용 이름 (예: Right elbow)")
    column: str = Field(..., description="기록 컬럼 라벨 (예: R_elbow)")
    degrees: float = Field(..., ge=0.0, le=180.0, description="끼인각 (도). 계산 불가 시 0")

    class Config:
        frozen = True
