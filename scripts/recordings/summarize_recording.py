# scripts/recordings/summarize_recording.py
from __future__ import annotations
import argparse, json
from pathlib import Path
from typing import Optional

import pandas as pd

from skeleton_recorder.constants import ANGLE_COLUMNS
from skeleton_recorder.infrastructure.storage.record_reader import (
    ELAPSED_COLUMN,
    SESSION_COLUMN,
    load_recording,
)


# ----------------- CLI 파서 -----------------
def _parse_args(argv=None):
    ap = argparse.ArgumentParser(description="skeleton recording CSV -> 각도 요약 통계")
    ap.add_argument("--csv", required=True, help="기록 파일 경로")
    ap.add_argument("--out", help="요약 JSON 출력 경로 (생략 시 stdout만)")
    ap.add_argument("--session", type=int, help="특정 세션 번호만 (0부터)")
    return ap.parse_args(argv)


def summarize(df: pd.DataFrame, session: Optional[int] = None) -> dict:
    """
    각도 컬럼별 n/mean/std/min/max.
    - 0 은 계산 불가 각도이므로 통계에서 제외하고 zero_count 로 따로 센다
    """
    if session is not None:
        df = df[df[SESSION_COLUMN] == session]

    out = {
        "frames": int(len(df)),
        "sessions": int(df[SESSION_COLUMN].nunique()) if len(df) else 0,
        "duration_ms": int(df[ELAPSED_COLUMN].max() - df[ELAPSED_COLUMN].min()) if len(df) else 0,
        "angles": {},
    }
    for col in ANGLE_COLUMNS:
        s = pd.to_numeric(df[col], errors="coerce").dropna()
        valid = s[s != 0.0]
        out["angles"][col] = {
            "n": int(len(valid)),
            "zero_count": int((s == 0.0).sum()),
            "mean": float(valid.mean()) if len(valid) else None,
            "std": float(valid.std(ddof=0)) if len(valid) else None,
            "min": float(valid.min()) if len(valid) else None,
            "max": float(valid.max()) if len(valid) else None,
        }
    return out


def main(argv=None):
    args = _parse_args(argv)
    df = load_recording(Path(args.csv))
    summary = summarize(df, session=args.session)

    text = json.dumps(summary, indent=2, ensure_ascii=False)
    print(text)
    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        print(f"[OK] wrote summary -> {out}")
    return summary


if __name__ == "__main__":
    main()
