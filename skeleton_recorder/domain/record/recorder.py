"""
프레임 기록 Domain Logic
관절 위치 + 각도 → 콤마 구분 레코드 (헤더는 세션당 1회)

헤더:
    ,,HipCenter,,,Spine,, ... ,FootRight,,
    Elapsed,x,y,z,x,y,z, ... ,L_neck,L_shoulder,L_elbow,L_wrist,R_neck,R_shoulder,R_elbow,R_wrist
데이터 행:
    <elapsedMs>,<x>,<y>,<z>, ... ,<angle1>,...,<angle8>
"""
import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from skeleton_recorder.constants import ANGLE_COLUMNS, JOINT_ORDER, JointType
from skeleton_recorder.schemas.angle_dto import AngleResult
from skeleton_recorder.schemas.frame_dto import Frame, Vector3

logger = logging.getLogger(__name__)

SESSION_BANNER = "Start skeleton detection\nJoint name,(x),(y),(z)\n"


class RecordSinkError(RuntimeError):
    """기록 저장소에 쓸 수 없음 (기록 경로에서는 치명적)"""


class RecordSink(Protocol):
    """append-only 기록 저장소. 실패 시 RecordSinkError 를 던진다"""

    def append(self, text: str) -> None:
        ...


@dataclass
class RecorderState:
    """
    세션 단위 기록 상태
    - header_written: 처음엔 False, 헤더 쓰기가 성공한 뒤에만 True
    - clock_origin: 처음엔 None, 첫 추적 프레임의 timestamp 로 한 번만 설정
    """
    header_written: bool = False
    clock_origin: Optional[float] = None


def format_position(v: Vector3) -> str:
    """(x, y, z) → 'x,y,z,' (소수 4자리, 지수 표기 없음)"""
    return f"{v.x:.4f},{v.y:.4f},{v.z:.4f},"


def build_header(joints: Sequence[JointType] = JOINT_ORDER,
                 angle_columns: Sequence[str] = ANGLE_COLUMNS) -> str:
    names = "".join(f",{jt.value},," for jt in joints)
    coords = "x,y,z," * len(joints)
    return f",{names}\nElapsed,{coords}{','.join(angle_columns)}\n"


def format_row(elapsed_ms: int, frame: Frame, angles: Sequence[AngleResult]) -> str:
    """경과 시간 + 20개 관절 좌표 + 각도 8개 → 한 줄"""
    positions = "".join(format_position(s.position) for s in frame.joints)
    values = ",".join(f"{a.degrees:.4f}" for a in angles)
    return f"{elapsed_ms:02d},{positions}{values}\n"


class FrameRecorder:
    """프레임마다 한 줄씩 sink 에 추가 (재시도/버퍼링 없음)"""

    def __init__(self, sink: RecordSink, state: Optional[RecorderState] = None):
        self.sink = sink
        self.state = state or RecorderState()

    def reset(self) -> None:
        """새 세션 시작: 헤더를 다시 쓰고 시계도 다음 추적 프레임에서 다시 시작"""
        self.state = RecorderState()

    def start_clock(self, timestamp: float) -> None:
        """첫 추적 프레임에서 시계 시작. 이후 호출은 무시 (세션 안에서는 리셋 없음)"""
        if self.state.clock_origin is None:
            self.state.clock_origin = timestamp
            logger.info("⏱️ recording clock started")

    def elapsed_ms(self, timestamp: float) -> int:
        if self.state.clock_origin is None:
            return 0
        return int((timestamp - self.state.clock_origin) * 1000.0)

    def write_banner(self) -> None:
        self.sink.append(SESSION_BANNER)

    def record(self, frame: Frame, angles: Sequence[AngleResult]) -> str:
        """
        헤더(최초 1회) + 데이터 행 기록

        Returns:
            기록한 데이터 행
        """
        if not self.state.header_written:
            self.sink.append(build_header())
            self.state.header_written = True

        row = format_row(self.elapsed_ms(frame.timestamp), frame, angles)
        self.sink.append(row)
        logger.debug(f"recorded row ({len(row)} chars)")
        return row
