"""
どこで: `api` 入口（高レベル公開 API）。
何を: エフェクト生成 `create_effect`・連番描画 `render_loop`・図形/イージング登録の装飾子を再輸出。
なぜ: 利用者が単一名前空間から 図形選択 → 設定 → 描画 まで完結できるようにするため。

Usage:
    import asyncio
    from api import create_effect, render_loop

    effect = create_effect("tree_of_life", preset="cinematic")
    asyncio.run(render_loop(effect, 120, width=1024, height=1024, out_dir="renders"))
"""

from effects.overlays import OverlayContext, OverlayKind
from engine.core.config import AnimationConfig, ConfigurationError
from engine.core.easing import easing as easing  # 公開唯一経路（api.easing）
from engine.render.pipeline import FrameRenderError, PhaseAnimatedEffect
from presets import get_preset, list_presets
from shapes import list_figures
from shapes.registry import figure as figure  # 公開唯一経路（api.figure）

from .effect import build_config, create_effect, render_frame, render_loop

__all__ = [
    # メインAPI
    "create_effect",
    "render_loop",
    "render_frame",
    "build_config",
    # ユーザー拡張用デコレータ
    "figure",
    "easing",
    # 一覧
    "list_figures",
    "list_presets",
    "get_preset",
    # 型/例外（高度な使用）
    "AnimationConfig",
    "ConfigurationError",
    "FrameRenderError",
    "OverlayContext",
    "OverlayKind",
    "PhaseAnimatedEffect",
]

__version__ = "2026.10"
