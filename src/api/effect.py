"""
どこで: `api.effect`
何を: 図形名/プリセット名からエフェクトを組み立てる `create_effect` と、全フレームを描く `render_loop`。
なぜ: 設定の正規化・ランダム選択の確定・図形の解決を 1 か所にまとめ、利用側を 1 行にするため。

使用例:
    effect = create_effect("tree_of_life", preset="minimalist", seed=7)
    layers = asyncio.run(render_loop(effect, 60, width=512, height=512, out_dir="renders"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from effects.overlays import OverlayKind, OverlayRenderer
from engine.core.config import AnimationConfig, resolve_random_choices
from engine.render.pipeline import PhaseAnimatedEffect
from engine.render.raster import RasterLayer
from engine.render.surface import CanvasFactory
from presets import get_preset
from shapes import build_figure
from shapes.base import GeometryProvider
from util.paths import ensure_render_dir, frame_filename
from util.utils import load_preset_file

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


def _resolve_preset(preset: str | Path | Mapping[str, Any] | None) -> dict[str, Any]:
    if preset is None:
        return {}
    if isinstance(preset, Mapping):
        return dict(preset)
    if isinstance(preset, Path) or str(preset).lower().endswith(_YAML_SUFFIXES):
        return load_preset_file(preset)
    return get_preset(str(preset))


def build_config(
    preset: str | Path | Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
    seed: int | None = None,
) -> AnimationConfig:
    """プリセット + 上書きから設定を作る（候補リストは `seed` で確定させる）。

    例外:
    - KeyError: 未登録のプリセット名。
    - ConfigurationError: 設定値の違反。
    """
    options = _resolve_preset(preset)
    options.update(overrides or {})
    return AnimationConfig.from_mapping(resolve_random_choices(options, seed))


def create_effect(
    figure: str | GeometryProvider,
    *,
    preset: str | Path | Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
    seed: int | None = None,
    overlays: Mapping[OverlayKind | str, OverlayRenderer] | None = None,
    canvas_factory: CanvasFactory | None = None,
) -> PhaseAnimatedEffect:
    """図形（登録名または `GeometryProvider`）とプリセットからエフェクトを作る。"""
    provider = build_figure(figure) if isinstance(figure, str) else figure
    config = build_config(preset, overrides, seed)
    logger.debug(
        "create_effect figure=%s preset=%s families=%s",
        getattr(provider, "name", type(provider).__name__),
        preset if isinstance(preset, (str, Path)) else type(preset).__name__,
        ",".join(config.families),
    )
    return PhaseAnimatedEffect(
        provider, config, overlays=overlays, canvas_factory=canvas_factory
    )


async def render_frame(
    effect: PhaseAnimatedEffect,
    frame_index: int,
    total_frames: int,
    *,
    width: int,
    height: int,
) -> RasterLayer:
    """透明レイヤ 1 枚にフレームを描いて返す。"""
    layer = RasterLayer.blank(width, height)
    await effect.invoke(layer, frame_index, total_frames)
    return layer


async def render_loop(
    effect: PhaseAnimatedEffect,
    total_frames: int,
    *,
    width: int,
    height: int,
    out_dir: str | Path | None = None,
    keep: bool | None = None,
) -> list[RasterLayer]:
    """全フレームを順に描く。`out_dir` 指定時は `frame_0000.png` 形式で保存する。

    `keep` はレイヤを返り値に保持するか。既定は `out_dir` 未指定時のみ保持し、
    保存のみの場合はフレームごとに解放する。
    """
    if total_frames < 1:
        raise ValueError(f"total_frames must be >= 1, got {total_frames}")
    if width < 1 or height < 1:
        raise ValueError(f"canvas size must be >= 1, got {width}x{height}")
    if keep is None:
        keep = out_dir is None
    target = ensure_render_dir(out_dir) if out_dir is not None else None
    layers: list[RasterLayer] = []
    for i in range(total_frames):
        layer = await render_frame(effect, i, total_frames, width=width, height=height)
        if target is not None:
            layer.save(target / frame_filename(i, total_frames))
        if keep:
            layers.append(layer)
    if target is not None:
        logger.info("wrote %d frames to %s", total_frames, target)
    return layers


__all__ = ["build_config", "create_effect", "render_frame", "render_loop"]
