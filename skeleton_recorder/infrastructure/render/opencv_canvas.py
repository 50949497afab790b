"""
OpenCV 기반 RenderSink
RenderPrimitive 리스트를 640x480 BGR 이미지에 래스터화한다.

참고: OpenCV는 BGR 순서 사용 (프리미티브 색상은 RGB)
"""
import logging
from pathlib import Path
from typing import Optional, Protocol, Sequence, Union

import cv2
import numpy as np

from skeleton_recorder.constants import RENDER_WIDTH, RENDER_HEIGHT
from skeleton_recorder.schemas.render_dto import (
    Color,
    Ellipse,
    Line,
    Point2D,
    Rectangle,
    RenderPrimitive,
    Text,
)

logger = logging.getLogger(__name__)

# WPF 10pt 텍스트와 비슷한 크기가 나오는 배율
_FONT = cv2.FONT_HERSHEY_SIMPLEX
_FONT_SCALE_PER_PT = 0.035
_LINE_SPACING = 1.4


class RenderSink(Protocol):
    def draw(self, primitives: Sequence[RenderPrimitive]) -> None:
        ...


class OpenCVCanvas:
    """호출마다 새 이미지를 만들어 그린다 (캔버스 밖은 자연히 잘림)"""

    def __init__(self, width: float = RENDER_WIDTH, height: float = RENDER_HEIGHT):
        self.width = int(width)
        self.height = int(height)
        self.last_image: Optional[np.ndarray] = None

    def draw(self, primitives: Sequence[RenderPrimitive]) -> None:
        self.last_image = self.render(primitives)

    def render(self, primitives: Sequence[RenderPrimitive]) -> np.ndarray:
        image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        for p in primitives:
            if isinstance(p, Rectangle):
                self._rectangle(image, p)
            elif isinstance(p, Line):
                self._line(image, p)
            elif isinstance(p, Ellipse):
                self._ellipse(image, p)
            elif isinstance(p, Text):
                self._text(image, p)
            else:
                raise TypeError(f"unsupported primitive: {type(p).__name__}")
        return image

    def save(self, path: Union[str, Path]) -> Path:
        """마지막으로 그린 이미지를 파일로 저장"""
        if self.last_image is None:
            raise RuntimeError("nothing has been drawn yet")
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if not cv2.imwrite(str(path), self.last_image):
            raise RuntimeError(f"cv2.imwrite failed: {path}")
        logger.debug(f"🖼️ canvas saved: {path}")
        return path

    # ---- primitive별 그리기 ----
    def _rectangle(self, image: np.ndarray, r: Rectangle) -> None:
        x0, y0 = int(round(r.x)), int(round(r.y))
        x1, y1 = int(round(r.x + r.width)) - 1, int(round(r.y + r.height)) - 1
        cv2.rectangle(image, (x0, y0), (x1, y1), _bgr(r.fill), thickness=-1)

    def _line(self, image: np.ndarray, ln: Line) -> None:
        cv2.line(image, _pt(ln.start), _pt(ln.end), _bgr(ln.stroke.color),
                 thickness=ln.stroke.thickness, lineType=cv2.LINE_AA)

    def _ellipse(self, image: np.ndarray, e: Ellipse) -> None:
        axes = (max(int(round(e.radius_x)), 1), max(int(round(e.radius_y)), 1))
        cv2.ellipse(image, _pt(e.center), axes, 0, 0, 360, _bgr(e.fill), thickness=-1)

    def _text(self, image: np.ndarray, t: Text) -> None:
        scale = t.font_size * _FONT_SCALE_PER_PT
        # Hershey 폰트는 탭/개행을 못 그리므로 직접 처리
        x = int(round(t.position.x))
        y = int(round(t.position.y))
        for line in t.text.expandtabs(8).split("\n"):
            (_, h), baseline = cv2.getTextSize(line or " ", _FONT, scale, 1)
            # 프리미티브 위치는 글자 상단 기준, putText 는 baseline 기준
            y_base = y + h
            if line:
                cv2.putText(image, line, (x, y_base), _FONT, scale, _bgr(t.color), 1, cv2.LINE_AA)
            y += int(round((h + baseline) * _LINE_SPACING))


def _pt(p: Point2D) -> tuple[int, int]:
    return int(round(p.x)), int(round(p.y))


def _bgr(c: Color) -> tuple[int, int, int]:
    r, g, b = c
    return int(b), int(g), int(r)
