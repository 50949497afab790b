# tests/unit/test_overlay.py
from skeleton_recorder.constants import JointType
from skeleton_recorder.domain.angle.calculator import JointAngleComputer
from skeleton_recorder.presentation.overlay import OverlayLayout
from skeleton_recorder.schemas.frame_dto import JointTrackingState
from tests.test_helpers import make_frame


def _texts(frame):
    return OverlayLayout().texts(frame, JointAngleComputer().compute(frame))


def test_header_line(tracked_frame):
    texts = _texts(tracked_frame)
    assert texts[0].text == "\t\tx\ty\tz"
    assert (texts[0].position.x, texts[0].position.y) == (10.0, 10.0)


def test_joint_lines(tracked_frame):
    texts = _texts(tracked_frame)
    assert len(texts) == 1 + 20 + 8
    assert texts[1].text == "HipCenter\t0.0000\t0.0000\t2.0000"
    # 짧은 이름은 탭 하나 더
    assert texts[4].text == "Head\t\t0.0000\t0.7500\t2.0000"
    assert texts[1].position.y == 25.0
    assert texts[20].position.y == 310.0


def test_angle_lines_right_group_first(tracked_frame):
    angle_texts = _texts(tracked_frame)[21:]
    assert [t.text for t in angle_texts] == [
        "Right neck: 90.0000",
        "Right shoulder: 180.0000",
        "Right elbow: 90.0000",
        "Right wrist: 180.0000",
        "Left neck: 90.0000",
        "Left shoulder: 180.0000",
        "Left elbow: 180.0000",
        "Left wrist: 135.0000",
    ]
    # 관절 목록 다음 한 줄 띄움
    assert angle_texts[0].position.y == 340.0
    assert all(t.position.x == 20.0 for t in angle_texts)


def test_not_tracked_joints_skipped():
    frame = make_frame(joint_states={JointType.FootLeft: JointTrackingState.NotTracked,
                                     JointType.HandRight: JointTrackingState.Inferred})
    texts = _texts(frame)
    assert len(texts) == 1 + 19 + 8
    assert not any(t.text.startswith("FootLeft") for t in texts)
    assert any(t.text.startswith("HandRight") for t in texts)
