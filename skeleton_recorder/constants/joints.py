from enum import Enum
from typing import NamedTuple


# 센서(Kinect v1) 스켈레톤 관절 20개. 선언 순서 = 기록 파일의 컬럼 순서
class JointType(str, Enum):
    HipCenter = "HipCenter"
    Spine = "Spine"
    ShoulderCenter = "ShoulderCenter"
    Head = "Head"
    ShoulderLeft = "ShoulderLeft"
    ElbowLeft = "ElbowLeft"
    WristLeft = "WristLeft"
    HandLeft = "HandLeft"
    ShoulderRight = "ShoulderRight"
    ElbowRight = "ElbowRight"
    WristRight = "WristRight"
    HandRight = "HandRight"
    HipLeft = "HipLeft"
    KneeLeft = "KneeLeft"
    AnkleLeft = "AnkleLeft"
    FootLeft = "FootLeft"
    HipRight = "HipRight"
    KneeRight = "KneeRight"
    AnkleRight = "AnkleRight"
    FootRight = "FootRight"


JOINT_ORDER = tuple(JointType)

# 오버레이 텍스트에서 탭 하나를 더 붙여 열을 맞추는 짧은 이름들
SHORT_NAME_JOINTS = frozenset({JointType.Head, JointType.HipLeft})


class Bone(NamedTuple):
    """렌더링 전용 뼈대 연결 (start → end)"""
    name: str
    start: JointType
    end: JointType


class AngleSpec(NamedTuple):
    """파생 각도 정의: vertex 에서 ray_a, ray_b 로 뻗는 두 벡터의 끼인각"""
    name: str
    column: str
    vertex: JointType
    ray_a: JointType
    ray_b: JointType


J = JointType

BONES = (
    # 몸통 (Torso)
    Bone("head-neck", J.Head, J.ShoulderCenter),
    Bone("neck-shoulder_left", J.ShoulderCenter, J.ShoulderLeft),
    Bone("neck-shoulder_right", J.ShoulderCenter, J.ShoulderRight),
    Bone("neck-spine", J.ShoulderCenter, J.Spine),
    Bone("spine-hip", J.Spine, J.HipCenter),
    Bone("hip-hip_left", J.HipCenter, J.HipLeft),
    Bone("hip-hip_right", J.HipCenter, J.HipRight),

    # 왼팔 (Left Arm)
    Bone("upper_arm_left", J.ShoulderLeft, J.ElbowLeft),
    Bone("forearm_left", J.ElbowLeft, J.WristLeft),
    Bone("hand_left", J.WristLeft, J.HandLeft),

    # 오른팔 (Right Arm)
    Bone("upper_arm_right", J.ShoulderRight, J.ElbowRight),
    Bone("forearm_right", J.ElbowRight, J.WristRight),
    Bone("hand_right", J.WristRight, J.HandRight),

    # 왼다리 (Left Leg)
    Bone("thigh_left", J.HipLeft, J.KneeLeft),
    Bone("shin_left", J.KneeLeft, J.AnkleLeft),
    Bone("foot_left", J.AnkleLeft, J.FootLeft),

    # 오른다리 (Right Leg)
    Bone("thigh_right", J.HipRight, J.KneeRight),
    Bone("shin_right", J.KneeRight, J.AnkleRight),
    Bone("foot_right", J.AnkleRight, J.FootRight),
)

# 각도 8종 (왼쪽 그룹 → 오른쪽 그룹). 순서 = 기록 파일의 각도 컬럼 순서
ANGLE_SPECS = (
    AngleSpec("Left neck", "L_neck", J.ShoulderCenter, J.Head, J.ShoulderLeft),
    AngleSpec("Left shoulder", "L_shoulder", J.ShoulderLeft, J.ShoulderCenter, J.ElbowLeft),
    AngleSpec("Left elbow", "L_elbow", J.ElbowLeft, J.ShoulderLeft, J.WristLeft),
    AngleSpec("Left wrist", "L_wrist", J.WristLeft, J.ElbowLeft, J.HandLeft),
    AngleSpec("Right neck", "R_neck", J.ShoulderCenter, J.Head, J.ShoulderRight),
    AngleSpec("Right shoulder", "R_shoulder", J.ShoulderRight, J.ShoulderCenter, J.ElbowRight),
    AngleSpec("Right elbow", "R_elbow", J.ElbowRight, J.ShoulderRight, J.WristRight),
    AngleSpec("Right wrist", "R_wrist", J.WristRight, J.ElbowRight, J.HandRight),
)

ANGLE_COLUMNS = tuple(spec.column for spec in ANGLE_SPECS)
