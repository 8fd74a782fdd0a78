from __future__ import annotations

import numpy as np

MIN_SIDES = 3
MAX_SIDES = 120


def _unit_polygon(n_sides: int) -> np.ndarray:
    """半径 1 の正多角形の頂点配列（閉じない、+X 軸上に最初の頂点）。"""
    t = np.linspace(0, 2 * np.pi, n_sides, endpoint=False)
    return np.stack([np.cos(t), np.sin(t)], axis=1)


def polygon_vertices(
    n_sides: int | float,
    radius: float,
    center: tuple[float, float],
    rotation: float = 0.0,
) -> np.ndarray:
    """中心 `center`・外接半径 `radius` の正多角形の頂点 (N, 2) を返す。

    引数:
        n_sides: 辺の数（3..120 に丸める）。
        radius: 外接円の半径 [px]。
        center: 中心 (px, py)。
        rotation: 頂点開始角（度数法）。
    """
    sides = int(round(float(n_sides)))
    sides = max(MIN_SIDES, min(MAX_SIDES, sides))

    vertices = _unit_polygon(sides)
    if rotation:
        theta = float(rotation) * np.pi / 180.0
        cos_t = np.cos(theta)
        sin_t = np.sin(theta)
        x = vertices[:, 0]
        y = vertices[:, 1]
        vertices = np.stack([x * cos_t - y * sin_t, x * sin_t + y * cos_t], axis=1)
    return vertices * float(radius) + np.asarray(center, dtype=np.float64)


__all__ = ["polygon_vertices", "MIN_SIDES", "MAX_SIDES"]
