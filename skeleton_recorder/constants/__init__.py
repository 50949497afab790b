# re-exports: 다른 모듈에서 짧게 import 하도록

from .joints import (
    JointType, JOINT_ORDER, SHORT_NAME_JOINTS,
    Bone, BONES, AngleSpec, ANGLE_SPECS, ANGLE_COLUMNS,
)

from .render_params import (
    RENDER_WIDTH,
    RENDER_HEIGHT,
    JOINT_THICKNESS,
    BODY_CENTER_THICKNESS,
    CLIP_BOUNDS_THICKNESS,
    BACKGROUND_COLOR,
    CLIP_EDGE_COLOR,
    CENTER_POINT_COLOR,
    TRACKED_JOINT_COLOR,
    INFERRED_JOINT_COLOR,
    TRACKED_BONE_COLOR,
    TRACKED_BONE_THICKNESS,
    INFERRED_BONE_COLOR,
    INFERRED_BONE_THICKNESS,
    OVERLAY_TEXT_COLOR,
    OVERLAY_FONT_SIZE,
    NOMINAL_DEPTH_FOCAL_PX,
)
