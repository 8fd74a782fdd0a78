"""
どこで: `effects` パッケージ。
何を: 図形描画の上に重ねるオーバーレイ（エネルギーパルス/シンボル）の拡張点。
なぜ: 基底の描画パイプラインから任意演出を切り離し、種別ごとに差し替え可能にするため。
"""

from .overlays import (
    OVERLAY_ORDER,
    OverlayContext,
    OverlayKind,
    OverlayRenderer,
    render_overlays,
)

__all__ = [
    "OVERLAY_ORDER",
    "OverlayContext",
    "OverlayKind",
    "OverlayRenderer",
    "render_overlays",
]
