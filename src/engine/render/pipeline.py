"""
どこで: `engine.render.pipeline`
何を: 1 フレームの描画オーケストレーション（Locate → DrawNodes → DrawPaths → Overlays → Composite）。
なぜ: 純粋な計算層（`engine.core`）の出力を描画面への呼び出し列に変換し、
      フレームを「全部描けるか、全く合成しないか」の単位で扱うため。

ポイント:
- フレーム間で状態を持たない。出力は (frame_index, total_frames, 設定) だけで決まり、
  順不同・並行（`asyncio.gather`）に描いても同一結果になる。
- 描画面の呼び出しは 1 フレーム内で順に await する（同一キャンバスへ並行描画しない）。
- 描画面の失敗は `FrameRenderError` に包んで再送出し、合成先レイヤには何も書かない。
- 図形の契約違反（`GeometryContractError`）は包まずにそのまま伝搬する。
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Mapping

import numpy as np

from common import settings as _settings
from effects.overlays import (
    OverlayContext,
    OverlayKind,
    OverlayRenderer,
    normalize_overlays,
    render_overlays,
)
from engine.core.config import AnimationConfig
from engine.core.coords import to_pixels_array
from engine.core.progress import progress
from engine.core.synthesis import FrameParameters, synthesize
from shapes.base import GeometryContractError, GeometryNode, GeometryProvider, node_array
from shapes.base import geometry_metadata as _geometry_metadata

from .surface import Canvas, CanvasFactory, CompositeLayer

logger = logging.getLogger(__name__)

# リング（グロー）の線幅とアルファ係数
RING_THICKNESS = 3.0
RING_ALPHA_FACTOR = 0.5
# パスの外側ストローク幅
PATH_OUTER_THICKNESS = 1.0


class RenderStage(enum.Enum):
    ALLOCATE = "allocate"
    DRAW_NODES = "draw_nodes"
    DRAW_PATHS = "draw_paths"
    OVERLAYS = "overlays"
    COMPOSITE = "composite"


class FrameRenderError(RuntimeError):
    """描画面の失敗をフレーム番号・段階付きで包む。元例外は `original` と `__cause__`。"""

    def __init__(
        self,
        frame_index: int,
        original: BaseException,
        stage: RenderStage | None = None,
    ) -> None:
        where = f" during {stage.value}" if stage is not None else ""
        super().__init__(f"frame {frame_index} failed{where}: {original!r}")
        self.frame_index = frame_index
        self.original = original
        self.stage = stage


def _default_canvas_factory() -> CanvasFactory:
    from .raster import RasterCanvasFactory  # local import（Pillow を必要時のみ読み込む）

    return RasterCanvasFactory()


class PhaseAnimatedEffect:
    """図形 1 つを 4 フェーズのループで描くエフェクト。

    引数:
        figure: ノード座標とパス接続を供給する図形。
        config: 構築済みの不変設定。
        overlays: `OverlayKind`（または "energy_pulses" 等）→ 非同期描画関数。未指定は no-op。
        canvas_factory: 描画面の確保手段。未指定は Pillow 実装。
    """

    def __init__(
        self,
        figure: GeometryProvider,
        config: AnimationConfig,
        *,
        overlays: Mapping[OverlayKind | str, OverlayRenderer] | None = None,
        canvas_factory: CanvasFactory | None = None,
    ) -> None:
        self.figure = figure
        self.config = config
        self.overlays = normalize_overlays(overlays)
        self.canvas_factory = canvas_factory or _default_canvas_factory()

    # ---- 計算のみ ----
    def frame_parameters(self, frame_index: int, total_frames: int) -> FrameParameters:
        """Locate 段の結果（描画はしない）。"""
        return synthesize(progress(frame_index, total_frames), self.config)

    def geometry_metadata(self) -> dict[str, Any]:
        return _geometry_metadata(self.figure)

    # ---- 描画 ----
    async def invoke(self, layer: CompositeLayer, frame_index: int, total_frames: int) -> None:
        """フレーム `frame_index` を描いて `layer` に重ねる。"""
        params = self.frame_parameters(frame_index, total_frames)
        nodes = list(self.figure.node_positions())
        paths = list(self.figure.path_connections())
        width, height = self._surface_size(layer)
        pixels = to_pixels_array(node_array(nodes), width, height, self.config)
        if _settings.get().DEBUG_TRANSITIONS and params.transition.in_transition:
            logger.debug(
                "frame %d: %s -> %s blend=%.3f",
                frame_index,
                params.transition.current_phase.label,
                params.transition.next_phase.label if params.transition.next_phase else "-",
                params.transition.blend_amount,
            )

        stage = RenderStage.ALLOCATE
        try:
            canvas = await self.canvas_factory.allocate(width, height)
            stage = RenderStage.DRAW_NODES
            await self._draw_nodes(canvas, nodes, pixels, params)
            stage = RenderStage.DRAW_PATHS
            await self._draw_paths(canvas, nodes, pixels, paths, params)
            stage = RenderStage.OVERLAYS
            ctx = OverlayContext(canvas, width, height, params, tuple(nodes), pixels, tuple(paths))
            await render_overlays(self.overlays, ctx)
            stage = RenderStage.COMPOSITE
            rendered = await canvas.to_layer()
            await rendered.set_opacity(float(params.get("layer_opacity", 1.0)))
            await layer.composite_over(rendered)
        except GeometryContractError:
            raise
        except Exception as e:
            logger.error("frame %d failed during %s: %s", frame_index, stage.value, e)
            raise FrameRenderError(frame_index, e, stage) from e

    def _surface_size(self, layer: CompositeLayer) -> tuple[int, int]:
        s = _settings.get()
        width = getattr(layer, "width", None) or s.CANVAS_WIDTH
        height = getattr(layer, "height", None) or s.CANVAS_HEIGHT
        return int(width), int(height)

    async def _draw_nodes(
        self,
        canvas: Canvas,
        nodes: list[GeometryNode],
        pixels: np.ndarray,
        params: FrameParameters,
    ) -> None:
        alpha = params.node_alpha
        size = float(params.get("node_size", 20.0))
        glow_size = float(params.get("node_glow_size", 25.0))
        sides = int(params.get("node_sides", 6))
        node_color = params.get("node_color", "#FFFFFF")
        glow_color = params.get("glow_color", "#FFFF00")
        for node, (px, py) in zip(nodes, pixels):
            center = (float(px), float(py))
            await canvas.draw_filled_polygon(
                size, center, sides, 0.0, node.color or node_color, alpha
            )
            await canvas.draw_ring(
                center,
                glow_size,
                RING_THICKNESS,
                node.glow_color or glow_color,
                0.0,
                alpha * RING_ALPHA_FACTOR,
            )

    async def _draw_paths(
        self,
        canvas: Canvas,
        nodes: list[GeometryNode],
        pixels: np.ndarray,
        paths: list[tuple[int, int]],
        params: FrameParameters,
    ) -> None:
        intensity = params.path_intensity
        thickness = float(params.get("path_thickness", 2.0)) * float(
            params.get("path_size_scale", 1.0)
        )
        color = params.get("path_color", "#FFFFFF")
        glow_color = params.get("glow_color", "#FFFF00")
        n = len(nodes)
        for a, b in paths:
            if not (0 <= a < n and 0 <= b < n):
                logger.debug("skip path (%s, %s): node index out of range (n=%d)", a, b, n)
                continue
            await canvas.draw_line(
                (float(pixels[a][0]), float(pixels[a][1])),
                (float(pixels[b][0]), float(pixels[b][1])),
                thickness,
                color,
                PATH_OUTER_THICKNESS,
                glow_color,
                intensity,
            )


__all__ = [
    "FrameRenderError",
    "PATH_OUTER_THICKNESS",
    "PhaseAnimatedEffect",
    "RING_ALPHA_FACTOR",
    "RING_THICKNESS",
    "RenderStage",
]
