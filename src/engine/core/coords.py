"""
どこで: `engine.core.coords`
何を: 図形の正規化座標 (0..1) を出力面のピクセル座標へ写す（中心 0.5 周りの一様スケール + 中心移動）。
なぜ: 図形定義を解像度から独立させ、`scale` / `center_x` / `center_y` だけで配置を変えるため。

式（各軸）:
    scaled  = 0.5 + (n - 0.5) * scale
    shifted = (scaled - 0.5) + center      # center 既定 0.5（移動なし）
    pixel   = shifted * dimension
回転や軸ごとの非一様スケールは扱わない。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from common.types import Point

if TYPE_CHECKING:
    from .config import AnimationConfig


def _placement(config: "AnimationConfig") -> tuple[float, float, float]:
    return (
        config.get_float("scale", 1.0),
        config.get_float("center_x", 0.5),
        config.get_float("center_y", 0.5),
    )


def to_pixels(
    normalized_x: float,
    normalized_y: float,
    width: float,
    height: float,
    config: "AnimationConfig",
) -> Point:
    """正規化座標 1 点をピクセル座標 (px, py) へ変換する。"""
    scale, cx, cy = _placement(config)
    sx = 0.5 + (normalized_x - 0.5) * scale
    sy = 0.5 + (normalized_y - 0.5) * scale
    return ((sx - 0.5 + cx) * width, (sy - 0.5 + cy) * height)


def to_pixels_array(
    xy: np.ndarray, width: float, height: float, config: "AnimationConfig"
) -> np.ndarray:
    """(N, 2) の正規化座標をまとめてピクセル座標へ変換する（float64）。"""
    pts = np.asarray(xy, dtype=np.float64).reshape(-1, 2)
    scale, cx, cy = _placement(config)
    scaled = 0.5 + (pts - 0.5) * scale
    shifted = scaled - 0.5 + np.array([cx, cy], dtype=np.float64)
    return shifted * np.array([width, height], dtype=np.float64)


__all__ = ["to_pixels", "to_pixels_array"]
