"""
Chakra Mandala（7 チャクラ + 中央経路）

根（下）→ 王冠（上）の順に中心軸上へ配置し、隣接チャクラ同士をパスで結ぶ。
`metadata` に半径・周波数を持つ（オーバーレイ用、エンジンは参照しない）。
"""

from __future__ import annotations

from types import MappingProxyType

from .base import GeometryNode, StaticFigure
from .registry import figure

# (id, name, y, radius, color, glow, frequency[Hz])
_CHAKRAS = (
    ("muladhara", "Root (Muladhara)", 0.85, 25, "#E74C3C", "#C0392B", 228),
    ("svadhisthana", "Sacral (Svadhisthana)", 0.72, 24, "#F39C12", "#D68910", 303),
    ("manipura", "Solar Plexus (Manipura)", 0.59, 24, "#F1C40F", "#D4AF37", 384),
    ("anahata", "Heart (Anahata)", 0.50, 26, "#2ECC71", "#27AE60", 341),
    ("vishuddha", "Throat (Vishuddha)", 0.41, 23, "#3498DB", "#2980B9", 384),
    ("ajna", "Third Eye (Ajna)", 0.28, 22, "#9B59B6", "#8E44AD", 426),
    ("sahasrara", "Crown (Sahasrara)", 0.15, 24, "#E91E63", "#C2185B", 432),
)

MANDALA_RING_RADII: tuple[float, ...] = (0.15, 0.30, 0.45)


@figure
def chakra_mandala(*, x: float = 0.5) -> StaticFigure:
    """7 チャクラを `x` の縦軸上に並べた図形（パスは隣接チャクラ間の 6 本）。"""
    nodes = tuple(
        GeometryNode(
            id=cid,
            name=name,
            x=float(x),
            y=y,
            color=color,
            glow_color=glow,
            metadata=MappingProxyType({"index": i, "radius": radius, "frequency": freq}),
        )
        for i, (cid, name, y, radius, color, glow, freq) in enumerate(_CHAKRAS)
    )
    paths = tuple((i, i + 1) for i in range(len(nodes) - 1))
    return StaticFigure(
        nodes=nodes,
        paths=paths,
        name="Chakra Mandala",
        description="seven chakras along the central channel, root to crown",
    )


__all__ = ["chakra_mandala", "MANDALA_RING_RADII"]
