"""
렌더링 프리미티브 DTO
SkeletonRenderPlan → RenderSink 로 넘어가는 유일한 데이터
"""
from typing import Literal, Union

from pydantic import BaseModel, Field

from skeleton_recorder.constants import (
    BACKGROUND_COLOR,
    CLIP_EDGE_COLOR,
    CENTER_POINT_COLOR,
    TRACKED_JOINT_COLOR,
    INFERRED_JOINT_COLOR,
    TRACKED_BONE_COLOR,
    TRACKED_BONE_THICKNESS,
    INFERRED_BONE_COLOR,
    INFERRED_BONE_THICKNESS,
    JOINT_THICKNESS,
    BODY_CENTER_THICKNESS,
    CLIP_BOUNDS_THICKNESS,
    OVERLAY_TEXT_COLOR,
    OVERLAY_FONT_SIZE,
)

# RGB (0~255)
Color = tuple[int, int, int]


class Point2D(BaseModel):
    """화면 좌표 (px). 클램핑하지 않으므로 캔버스 밖 값도 허용"""
    x: float
    y: float

    class Config:
        frozen = True


class StrokeStyle(BaseModel):
    color: Color
    thickness: int = Field(1, ge=1)

    class Config:
        frozen = True


class Line(BaseModel):
    kind: Literal["line"] = "line"
    start: Point2D
    end: Point2D
    stroke: StrokeStyle

    class Config:
        frozen = True


class Ellipse(BaseModel):
    kind: Literal["ellipse"] = "ellipse"
    center: Point2D
    radius_x: float
    radius_y: float
    fill: Color

    class Config:
        frozen = True


class Rectangle(BaseModel):
    kind: Literal["rectangle"] = "rectangle"
    x: float
    y: float
    width: float
    height: float
    fill: Color

    class Config:
        frozen = True


class Text(BaseModel):
    kind: Literal["text"] = "text"
    text: str
    position: Point2D
    color: Color = OVERLAY_TEXT_COLOR
    font_size: int = OVERLAY_FONT_SIZE

    class Config:
        frozen = True


RenderPrimitive = Union[Line, Ellipse, Rectangle, Text]


class RenderStyle(BaseModel):
    """스켈레톤 그리기 스타일 (기본값은 constants.render_params)"""
    background: Color = BACKGROUND_COLOR
    clip_edge_fill: Color = CLIP_EDGE_COLOR
    clip_edge_thickness: float = CLIP_BOUNDS_THICKNESS
    center_point_fill: Color = CENTER_POINT_COLOR
    center_point_radius: float = BODY_CENTER_THICKNESS
    tracked_joint_fill: Color = TRACKED_JOINT_COLOR
    inferred_joint_fill: Color = INFERRED_JOINT_COLOR
    joint_radius: float = JOINT_THICKNESS
    # 양 끝 관절이 모두 Tracked 일 때만 confident
    confident_bone: StrokeStyle = StrokeStyle(color=TRACKED_BONE_COLOR, thickness=TRACKED_BONE_THICKNESS)
    tentative_bone: StrokeStyle = StrokeStyle(color=INFERRED_BONE_COLOR, thickness=INFERRED_BONE_THICKNESS)

    class Config:
        frozen = True


DEFAULT_RENDER_STYLE = RenderStyle()
