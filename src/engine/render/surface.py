"""
どこで: `engine.render.surface`
何を: 描画面（キャンバス確保・図形プリミティブ・レイヤ合成）の非同期インターフェース。
なぜ: パイプラインを具体的な描画バックエンド（Pillow 実装、テスト用の記録実装など）から切り離すため。

約束:
- 全操作は coroutine。パイプラインは 1 フレーム内で順に await し、同一キャンバスへ並行に描かない。
- 座標はピクセル、色は Hex 文字列、アルファ/強度は 0..1。
- 失敗は例外で返す（パイプライン側で `FrameRenderError` に包まれる）。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from common.types import HexColor, Point


@runtime_checkable
class CompositeLayer(Protocol):
    """合成可能なレイヤ（フレームの出力先、またはキャンバスから作られた中間層）。"""

    width: int
    height: int

    async def set_opacity(self, value: float) -> None: ...

    async def composite_over(self, layer: "CompositeLayer") -> None:
        """`layer` を自身の上に重ねる（自身が変更される）。"""
        ...


@runtime_checkable
class Canvas(Protocol):
    """1 フレームぶんの描画先。"""

    width: int
    height: int

    async def draw_filled_polygon(
        self,
        radius: float,
        center: Point,
        sides: int,
        rotation: float,
        color: HexColor,
        alpha: float,
    ) -> None: ...

    async def draw_ring(
        self,
        center: Point,
        radius: float,
        thickness: float,
        color: HexColor,
        rotation: float,
        alpha: float,
    ) -> None: ...

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
        """`outer_thickness` 幅の外側ストローク（`secondary_color`）の上に本線を描く。"""
        ...

    async def to_layer(self) -> CompositeLayer: ...


@runtime_checkable
class CanvasFactory(Protocol):
    async def allocate(self, width: int, height: int) -> Canvas: ...


__all__ = ["Canvas", "CanvasFactory", "CompositeLayer"]
