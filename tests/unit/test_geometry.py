# tests/unit/test_geometry.py
import math

import numpy as np
import pytest

from skeleton_recorder.domain.geometry.kernel import angle_between, norm3, vector_between
from skeleton_recorder.schemas.frame_dto import Vector3
from tests.test_helpers import assert_angle_range


def test_norm3_basic():
    assert norm3((3.0, 4.0, 0.0)) == pytest.approx(5.0)
    assert norm3(Vector3(x=1.0, y=2.0, z=2.0)) == pytest.approx(3.0)


def test_norm3_zero_vector():
    assert norm3((0.0, 0.0, 0.0)) == 0.0


def test_vector_between():
    v = vector_between((1.0, 1.0, 1.0), (2.0, 3.0, 4.0))
    assert np.allclose(v, [1.0, 2.0, 3.0])


def test_right_angle():
    """꼭짓점 원점, +x / +y 방향 → 90도"""
    angle = angle_between((0, 0, 0), (1, 0, 0), (0, 1, 0))
    assert abs(angle - 90.0) <= 1e-6


def test_straight_line_is_180_not_degenerate():
    """반대 방향 일직선은 유효한 180도 (퇴화 케이스와 구분)"""
    assert angle_between((0, 0, 0), (1, 0, 0), (-1, 0, 0)) == 180.0
    assert angle_between((1, 1, 1), (3, 1, 1), (-2, 1, 1)) == 180.0


def test_same_direction_is_zero():
    assert angle_between((0, 0, 0), (1, 0, 0), (2, 0, 0)) == 0.0


@pytest.mark.parametrize(
    "vertex,a,b",
    [
        ((0, 0, 0), (0, 0, 0), (1, 0, 0)),   # a == vertex
        ((0, 0, 0), (1, 0, 0), (0, 0, 0)),   # b == vertex
        ((1, 2, 3), (1, 2, 3), (1, 2, 3)),   # 세 점 동일
    ],
)
def test_degenerate_returns_zero(vertex, a, b):
    assert angle_between(vertex, a, b) == 0.0


def test_out_of_range_cosine_returns_zero(monkeypatch):
    """수치 오차로 cos 가 [-1, 1] 밖이면 클램프하지 않고 0"""
    import skeleton_recorder.domain.geometry.kernel as kernel

    # 노름을 살짝 작게 돌려줘서 |cos| > 1 을 만든다
    monkeypatch.setattr(kernel, "norm3", lambda v: float(np.linalg.norm(kernel._as_array(v))) * 0.999999)
    assert kernel.angle_between((0, 0, 0), (1, 0, 0), (-1, 0, 0)) == 0.0


def test_symmetric_in_rays():
    v, a, b = (0.1, -0.2, 2.0), (0.7, 0.4, 1.8), (-0.3, 0.9, 2.2)
    assert angle_between(v, a, b) == angle_between(v, b, a)


def test_matches_acos_reference():
    v, a, b = (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)
    angle = angle_between(v, a, b)
    assert angle == pytest.approx(45.0, abs=1e-9)
    assert_angle_range(angle)


def test_accepts_vector3():
    angle = angle_between(Vector3(), Vector3(x=0.0, y=2.0), Vector3(z=5.0))
    assert angle == pytest.approx(90.0)
    assert math.isfinite(angle)
