"""
どこで: `engine.render.raster`
何を: Pillow による描画面の実装（RGBA キャンバス、正多角形/リング/線、レイヤ合成、PNG 保存）。
なぜ: 外部ホストなしで 1 フレームを実際の画像として得る（CLI の連番書き出し、決定性テスト）ため。

描画方式:
- Pillow の `ImageDraw` は RGBA 画像へ半透明色を「上書き」するため、各プリミティブを
  外接矩形サイズの透明パッチに描いてから `Image.alpha_composite` で重ねる。
- 不透明度はアルファチャンネルへの乗算（numpy）。
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Callable

import numpy as np
from PIL import Image, ImageDraw

from common.types import HexColor, Point
from shapes.polygon import polygon_vertices
from util.color import rgba8

logger = logging.getLogger(__name__)

_TRANSPARENT = (0, 0, 0, 0)


def _stroke_width(value: float) -> int:
    return max(1, int(round(float(value))))


class RasterLayer:
    """RGBA 画像 1 枚を包む合成レイヤ。"""

    def __init__(self, image: Image.Image):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self._image = image

    @classmethod
    def blank(cls, width: int, height: int) -> "RasterLayer":
        """完全透明のレイヤを作る。"""
        if width < 1 or height < 1:
            raise ValueError(f"layer size must be positive: {width}x{height}")
        return cls(Image.new("RGBA", (int(width), int(height)), _TRANSPARENT))

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def image(self) -> Image.Image:
        return self._image

    async def set_opacity(self, value: float) -> None:
        v = min(1.0, max(0.0, float(value)))
        if v >= 1.0:
            return
        arr = np.array(self._image, dtype=np.float64)
        arr[..., 3] = np.round(arr[..., 3] * v)
        self._image = Image.fromarray(arr.astype(np.uint8))

    async def composite_over(self, layer: "RasterLayer") -> None:
        if not isinstance(layer, RasterLayer):
            raise TypeError(f"cannot composite {type(layer).__name__} onto RasterLayer")
        # サイズ違いは左上揃え（はみ出しは切り捨て）
        self._image.alpha_composite(layer.image)

    def to_array(self) -> np.ndarray:
        """(H, W, 4) uint8 のコピー。"""
        return np.array(self._image, dtype=np.uint8)

    def tobytes(self) -> bytes:
        return self._image.tobytes()

    def save(self, path: str | Path) -> Path:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        self._image.save(p, format="PNG")
        logger.debug("saved layer %s (%dx%d)", p, self.width, self.height)
        return p


class RasterCanvas:
    """1 フレームの描画先。プリミティブは外接矩形パッチ経由で合成する。"""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self._image = Image.new("RGBA", (self.width, self.height), _TRANSPARENT)

    def _stamp(
        self,
        bbox: tuple[float, float, float, float],
        paint: Callable[[ImageDraw.ImageDraw, float, float], None],
    ) -> None:
        """bbox（キャンバス座標）を覆う透明パッチに `paint(draw, ox, oy)` で描いて重ねる。"""
        x0 = max(0, int(math.floor(bbox[0])))
        y0 = max(0, int(math.floor(bbox[1])))
        x1 = min(self.width, int(math.ceil(bbox[2])) + 1)
        y1 = min(self.height, int(math.ceil(bbox[3])) + 1)
        if x1 <= x0 or y1 <= y0:
            return
        patch = Image.new("RGBA", (x1 - x0, y1 - y0), _TRANSPARENT)
        paint(ImageDraw.Draw(patch), float(x0), float(y0))
        self._image.alpha_composite(patch, dest=(x0, y0))

    async def draw_filled_polygon(
        self,
        radius: float,
        center: Point,
        sides: int,
        rotation: float,
        color: HexColor,
        alpha: float,
    ) -> None:
        verts = polygon_vertices(sides, radius, center, rotation)
        fill = rgba8(color, alpha)
        lo = verts.min(axis=0)
        hi = verts.max(axis=0)

        def paint(draw: ImageDraw.ImageDraw, ox: float, oy: float) -> None:
            pts = [(float(x) - ox, float(y) - oy) for x, y in verts]
            draw.polygon(pts, fill=fill)

        self._stamp((lo[0], lo[1], hi[0], hi[1]), paint)

    async def draw_ring(
        self,
        center: Point,
        radius: float,
        thickness: float,
        color: HexColor,
        rotation: float,
        alpha: float,
    ) -> None:
        """円環を描く（円なので `rotation` は見た目に影響しない）。"""
        cx, cy = float(center[0]), float(center[1])
        r = float(radius)
        outline = rgba8(color, alpha)
        width = _stroke_width(thickness)

        def paint(draw: ImageDraw.ImageDraw, ox: float, oy: float) -> None:
            draw.ellipse(
                (cx - r - ox, cy - r - oy, cx + r - ox, cy + r - oy),
                outline=outline,
                width=width,
            )

        self._stamp((cx - r, cy - r, cx + r, cy + r), paint)

    async def draw_line(
        self,
        a: Point,
        b: Point,
        thickness: float,
        color: HexColor,
        outer_thickness: float,
        secondary_color: HexColor,
        intensity: float,
    ) -> None:
        inner = _stroke_width(thickness)
        outer = inner + 2 * max(0, int(round(float(outer_thickness))))
        pad = outer / 2.0
        (ax, ay), (bx, by) = a, b
        bbox = (min(ax, bx) - pad, min(ay, by) - pad, max(ax, bx) + pad, max(ay, by) + pad)
        glow = rgba8(secondary_color, intensity)
        core = rgba8(color, intensity)

        def paint_glow(draw: ImageDraw.ImageDraw, ox: float, oy: float) -> None:
            draw.line([(ax - ox, ay - oy), (bx - ox, by - oy)], fill=glow, width=outer)

        def paint_core(draw: ImageDraw.ImageDraw, ox: float, oy: float) -> None:
            draw.line([(ax - ox, ay - oy), (bx - ox, by - oy)], fill=core, width=inner)

        if outer > inner:
            self._stamp(bbox, paint_glow)
        self._stamp(bbox, paint_core)

    async def to_layer(self) -> RasterLayer:
        return RasterLayer(self._image.copy())


class RasterCanvasFactory:
    async def allocate(self, width: int, height: int) -> RasterCanvas:
        if width < 1 or height < 1:
            raise ValueError(f"canvas size must be positive: {width}x{height}")
        return RasterCanvas(width, height)


__all__ = ["RasterCanvas", "RasterCanvasFactory", "RasterLayer"]
