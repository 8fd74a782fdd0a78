"""
図形（ノード + パス）基底モジュール

概要:
- 図形は「何を描くか」だけを表す。ノード座標は正規化 (0..1)、パスはノードインデックスの対。
- 「いつ・どの強さで描くか」はエンジン（`engine.core.synthesis`）が決めるので、図形は時間を知らない。
- 図形の能力は `GeometryProvider` Protocol（`node_positions` / `path_connections`）で表し、
  継承階層ではなく値（`StaticFigure`）またはクラス（`BaseFigure` 派生）で供給する。

契約違反:
- `BaseFigure` をオーバーライドせずに使うと、欠けている操作名を含む `GeometryContractError`
  を即座に送出する。空の描画で黙って進むことはない。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

import numpy as np

from common.types import PathConnection


class GeometryContractError(NotImplementedError):
    """図形がノード座標/パス接続を供給しない場合の致命的エラー。"""


@dataclass(frozen=True, slots=True)
class GeometryNode:
    """図形の 1 ノード（エンジンからは読み取り専用）。"""

    id: int | str
    name: str
    x: float
    y: float
    color: str | None = None
    glow_color: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@runtime_checkable
class GeometryProvider(Protocol):
    """図形の供給インターフェース。"""

    def node_positions(self) -> Sequence[GeometryNode]: ...

    def path_connections(self) -> Sequence[PathConnection]: ...


class BaseFigure:
    """クラスで図形を定義する場合の基底。

    派生クラスは `node_positions()` と `path_connections()` を実装する。
    `name` / `description` はメタデータ表示用。
    """

    name: str = "figure"
    description: str = ""

    def node_positions(self) -> Sequence[GeometryNode]:
        raise GeometryContractError(
            f"{type(self).__name__}.node_positions() must be implemented by the figure"
        )

    def path_connections(self) -> Sequence[PathConnection]:
        raise GeometryContractError(
            f"{type(self).__name__}.path_connections() must be implemented by the figure"
        )


@dataclass(frozen=True)
class StaticFigure(BaseFigure):
    """固定のノード列・パス列を持つ図形（登録済み図形はすべてこれを返す）。"""

    nodes: tuple[GeometryNode, ...]
    paths: tuple[PathConnection, ...]
    name: str = "figure"
    description: str = ""

    def node_positions(self) -> Sequence[GeometryNode]:
        return self.nodes

    def path_connections(self) -> Sequence[PathConnection]:
        return self.paths


def node_array(nodes: Sequence[GeometryNode]) -> np.ndarray:
    """ノード列の正規化座標を (N, 2) float64 配列で返す。"""
    if not nodes:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([[n.x, n.y] for n in nodes], dtype=np.float64)


def geometry_metadata(figure: GeometryProvider) -> dict[str, Any]:
    """{name, description, node_count, path_count} を返す。"""
    return {
        "name": getattr(figure, "name", type(figure).__name__),
        "description": getattr(figure, "description", ""),
        "node_count": len(figure.node_positions()),
        "path_count": len(figure.path_connections()),
    }


__all__ = [
    "BaseFigure",
    "GeometryContractError",
    "GeometryNode",
    "GeometryProvider",
    "StaticFigure",
    "geometry_metadata",
    "node_array",
]
