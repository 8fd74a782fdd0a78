"""
どこで: `shapes` パッケージ（図形登録）。
何を: ビルトイン図形を import 副作用で登録し、`api.create_effect` から名前で解決できるようにする。
なぜ: 「何を描くか」の拡張点を一箇所に集約し、エンジンから図形定義を切り離すため。
"""

# 図形定義を import して登録（副作用）
from . import chakra_mandala as _register_chakra_mandala  # noqa: F401
from . import tree_of_life as _register_tree_of_life  # noqa: F401
from .base import (
    BaseFigure,
    GeometryContractError,
    GeometryNode,
    GeometryProvider,
    StaticFigure,
    geometry_metadata,
)
from .registry import build_figure, figure, get_figure, is_figure_registered, list_figures

__all__ = [
    "BaseFigure",
    "GeometryContractError",
    "GeometryNode",
    "GeometryProvider",
    "StaticFigure",
    "build_figure",
    "figure",
    "geometry_metadata",
    "get_figure",
    "is_figure_registered",
    "list_figures",
]
