"""
どこで: `engine.render` サブパッケージ。
何を: 描画面インターフェース、Pillow 実装、フレーム描画パイプライン。
なぜ: 計算（`engine.core`）と描画の責務を分離し、描画バックエンドを差し替え可能にするため。
"""

from .pipeline import FrameRenderError, PhaseAnimatedEffect, RenderStage
from .surface import Canvas, CanvasFactory, CompositeLayer

__all__ = [
    "Canvas",
    "CanvasFactory",
    "CompositeLayer",
    "FrameRenderError",
    "PhaseAnimatedEffect",
    "RenderStage",
]
