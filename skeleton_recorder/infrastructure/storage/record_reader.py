"""
기록 CSV 로더 (오프라인 분석/재생용)
세션 배너/헤더가 여러 번 섞여 있어도 데이터 행만 모아 DataFrame 으로 만든다.
"""
from pathlib import Path
from typing import Union

import pandas as pd

from skeleton_recorder.constants import ANGLE_COLUMNS, JOINT_ORDER

ELAPSED_COLUMN = "elapsed_ms"
SESSION_COLUMN = "session"


def position_columns() -> list[str]:
    """HipCenter_x, HipCenter_y, HipCenter_z, Spine_x, ..."""
    return [f"{jt.value}_{axis}" for jt in JOINT_ORDER for axis in ("x", "y", "z")]


def record_columns() -> list[str]:
    return [ELAPSED_COLUMN, *position_columns(), *ANGLE_COLUMNS]


def load_recording(path: Union[str, Path]) -> pd.DataFrame:
    """
    기록 파일 → DataFrame

    - 'Elapsed,' 로 시작하는 컬럼 헤더가 나올 때마다 session 번호 증가
    - 관절 이름 줄/배너/빈 줄은 무시
    - 필드 개수가 맞지 않는 행(쓰다 끊긴 행), 경과 시간이 숫자가 아닌 행은 버림
    """
    columns = record_columns()
    rows: list[list[str]] = []
    sessions: list[int] = []
    session = -1

    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if line.startswith("Elapsed,"):
                session += 1
                continue
            if not line or not (line[0].isdigit() or line[0] == "-"):
                continue
            fields = line.split(",")
            if len(fields) != len(columns):
                continue
            rows.append(fields)
            sessions.append(max(session, 0))

    df = pd.DataFrame(rows, columns=columns)
    for c in columns:
        df[c] = pd.to_numeric(df[c], errors="coerce")
    df[SESSION_COLUMN] = pd.Series(sessions, dtype="int64")
    # 경과 시간이 숫자가 아닌 행은 버림
    df = df.dropna(subset=[ELAPSED_COLUMN]).reset_index(drop=True)
    df[ELAPSED_COLUMN] = df[ELAPSED_COLUMN].astype("Int64")
    return df
