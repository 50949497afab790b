# scripts/recordings/render_recording.py
from __future__ import annotations
import argparse
from pathlib import Path

import pandas as pd

from skeleton_recorder.constants import JOINT_ORDER
from skeleton_recorder.infrastructure.render.opencv_canvas import OpenCVCanvas
from skeleton_recorder.infrastructure.sensor.nominal_mapper import NominalDepthMapper
from skeleton_recorder.infrastructure.storage.record_reader import ELAPSED_COLUMN, load_recording
from skeleton_recorder.schemas.frame_dto import Frame
from skeleton_recorder.services.service_factory import create_frame_pipeline


def _parse_args(argv=None):
    ap = argparse.ArgumentParser(description="skeleton recording CSV -> PNG 프레임 (센서 없이 재생)")
    ap.add_argument("--csv", required=True, help="기록 파일 경로")
    ap.add_argument("--out", required=True, help="PNG 출력 디렉토리")
    ap.add_argument("--every", type=int, default=1, help="N 행마다 1장")
    ap.add_argument("--no-overlay", action="store_true", help="좌표/각도 텍스트 생략")
    return ap.parse_args(argv)


def row_to_frame(row: pd.Series) -> Frame:
    """기록 1행 → 모든 관절 Tracked 인 프레임 (추적 상태는 기록되지 않음)"""
    positions = {
        jt: (float(row[f"{jt.value}_x"]), float(row[f"{jt.value}_y"]), float(row[f"{jt.value}_z"]))
        for jt in JOINT_ORDER
    }
    return Frame.from_positions(positions, timestamp=float(row[ELAPSED_COLUMN]) / 1000.0)


def main(argv=None) -> list[Path]:
    args = _parse_args(argv)
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    df = load_recording(Path(args.csv))
    canvas = OpenCVCanvas()
    # 재생은 기록하지 않는다 (record_sink 없음)
    pipeline = create_frame_pipeline(NominalDepthMapper(), render_sink=canvas, overlay=not args.no_overlay)

    written = []
    step = max(args.every, 1)
    for i in range(0, len(df), step):
        frame = row_to_frame(df.iloc[i])
        pipeline.on_frame([frame])
        written.append(canvas.save(out_dir / f"frame_{i:06d}.png"))

    print(f"[OK] wrote {len(written)} frames -> {out_dir}")
    return written


if __name__ == "__main__":
    main()
