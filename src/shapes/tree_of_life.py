"""
Tree of Life（10 セフィラ + 22 パス）

- 3 本の柱（峻厳 = 左 / 中央 / 慈悲 = 右）に沿ってノードを配置。
- パスの並びはヘルメス順。`metadata["order"]` に描画順序、`letter` に対応文字を持つ。
- ノードの `metadata["activation_order"]` はフェーズごとの点灯順（オーバーレイ用）。
"""

from __future__ import annotations

from types import MappingProxyType

from .base import GeometryNode, StaticFigure
from .registry import figure

# (id, name, meaning, x, y, color, awakening 順, ascension 順)
_SEPHIROTH = (
    (1, "KETHER", "Crown", 0.50, 0.08, "#FFFFFF", 10, 1),
    (2, "CHOKMAH", "Wisdom", 0.75, 0.22, "#0099FF", 9, 2),
    (3, "BINAH", "Understanding", 0.25, 0.22, "#FF00FF", 8, 3),
    (4, "CHESED", "Mercy", 0.75, 0.42, "#0000FF", 6, 5),
    (5, "GEVURAH", "Severity", 0.25, 0.42, "#FF0000", 7, 4),
    (6, "TIFERETH", "Beauty", 0.50, 0.50, "#FFFF00", 3, 6),
    (7, "NETZACH", "Victory", 0.75, 0.65, "#00FF00", 4, 7),
    (8, "HOD", "Splendor", 0.25, 0.65, "#FFFF00", 5, 8),
    (9, "YESOD", "Foundation", 0.50, 0.80, "#9999FF", 2, 9),
    (10, "MALKUTH", "Kingdom", 0.50, 0.95, "#FFAA00", 1, 10),
)

# (start id, end id, letter) ヘルメス順
_PATHS = (
    (1, 2, "Aleph"),
    (1, 3, "Beth"),
    (2, 3, "Gimel"),
    (2, 4, "Daleth"),
    (3, 5, "He"),
    (4, 5, "Vav"),
    (4, 6, "Zayin"),
    (5, 6, "Cheth"),
    (6, 7, "Teth"),
    (6, 8, "Yodh"),
    (4, 7, "Kaph"),
    (5, 8, "Lamed"),
    (7, 8, "Mem"),
    (7, 9, "Nun"),
    (8, 9, "Samekh"),
    (6, 9, "Ayin"),
    (9, 10, "Pe"),
    (2, 5, "Tsade"),
    (3, 4, "Qoph"),
    (4, 8, "Resh"),
    (5, 7, "Shin"),
    (1, 6, "Tav"),
)

PATH_LETTERS: tuple[str, ...] = tuple(letter for _, _, letter in _PATHS)


def _nodes() -> tuple[GeometryNode, ...]:
    return tuple(
        GeometryNode(
            id=sid,
            name=name,
            x=x,
            y=y,
            color=color,
            metadata=MappingProxyType(
                {
                    "meaning": meaning,
                    "activation_order": {"awakening": aw, "ascension": asc},
                }
            ),
        )
        for sid, name, meaning, x, y, color, aw, asc in _SEPHIROTH
    )


def activation_order(phase: str) -> list[GeometryNode]:
    """フェーズ `phase` での点灯順にノードを並べて返す（指定なしは末尾）。"""
    return sorted(
        _nodes(),
        key=lambda n: n.metadata["activation_order"].get(phase, 999),
    )


@figure
def tree_of_life() -> StaticFigure:
    """10 セフィラと 22 パスの Tree of Life。パスのインデックスは 0 始まり。"""
    return StaticFigure(
        nodes=_nodes(),
        paths=tuple((a - 1, b - 1) for a, b, _ in _PATHS),
        name="Tree of Life",
        description="10 sephiroth joined by 22 paths in Hermetic order",
    )


__all__ = ["tree_of_life", "activation_order", "PATH_LETTERS"]
