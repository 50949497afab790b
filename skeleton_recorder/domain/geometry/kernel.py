"""
벡터 수학 (노름 / 차벡터 / 끼인각)
- 퇴화 케이스(길이 0 벡터, cos 범위 이탈)는 전부 0 으로 처리
"""
from typing import Sequence, Union

import numpy as np

from skeleton_recorder.schemas.frame_dto import Vector3

VectorLike = Union[Vector3, Sequence[float], np.ndarray]


def norm3(v: VectorLike) -> float:
    """3차원 벡터의 유클리드 노름. 영벡터는 0 (나눗셈 가드는 호출자 책임)"""
    return float(np.linalg.norm(_as_array(v)))


def vector_between(start: VectorLike, end: VectorLike) -> np.ndarray:
    """start → end 벡터 (end - start)"""
    return _as_array(end) - _as_array(start)


def angle_between(vertex: VectorLike, a: VectorLike, b: VectorLike) -> float:
    """
    끼인각 ∠(a, vertex, b) (도 단위).
    v1 = a - vertex, v2 = b - vertex
    cosθ = (v1·v2)/(|v1||v2|)

    - 어느 한쪽 벡터 길이가 0이거나 cos 값이 [-1, 1] 밖이면 0을 반환한다.
      (클램프하지 않음: 수치 오차 케이스는 "알 수 없는 각도"로 취급)
    """
    v1 = vector_between(vertex, a)
    v2 = vector_between(vertex, b)
    n1 = norm3(v1)
    n2 = norm3(v2)
    if n1 == 0.0 or n2 == 0.0:
        return 0.0

    cosv = float(np.dot(v1, v2)) / (n1 * n2)
    if not np.isfinite(cosv) or not (-1.0 <= cosv <= 1.0):
        return 0.0
    return float(np.degrees(np.arccos(cosv)))


def _as_array(v: VectorLike) -> np.ndarray:
    if isinstance(v, Vector3):
        return v.as_array()
    return np.asarray(v, dtype=float)
