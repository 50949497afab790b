# 출력 캔버스 크기 (센서 depth 640x480 해상도와 동일)
RENDER_WIDTH = 640.0
RENDER_HEIGHT = 480.0

# 두께/반지름 (px)
JOINT_THICKNESS = 3.0
BODY_CENTER_THICKNESS = 10.0
CLIP_BOUNDS_THICKNESS = 10.0

# 색상은 모두 RGB. (OpenCV 캔버스에서 BGR 로 변환)
BACKGROUND_COLOR = (0, 0, 0)
CLIP_EDGE_COLOR = (255, 0, 0)
CENTER_POINT_COLOR = (0, 0, 255)
TRACKED_JOINT_COLOR = (68, 192, 68)
INFERRED_JOINT_COLOR = (255, 255, 0)

TRACKED_BONE_COLOR = (0, 128, 0)
TRACKED_BONE_THICKNESS = 6
INFERRED_BONE_COLOR = (128, 128, 128)
INFERRED_BONE_THICKNESS = 1

OVERLAY_TEXT_COLOR = (255, 255, 255)
OVERLAY_FONT_SIZE = 10

# Kinect v1 depth 카메라 명목 초점거리 (640x480 기준, px)
NOMINAL_DEPTH_FOCAL_PX = 571.26
