"""
どこで: `scripts.render_loop`
何を: 図形 + プリセットから 1 ループ分の PNG 連番を書き出す CLI。
なぜ: ホストアプリなしでアニメーションを確認/書き出すため。

Usage:
    python -m scripts.render_loop --figure tree_of_life --preset minimalist \
        --frames 60 --width 512 --height 512 --out renders/

構成（`configs/default.yaml` / ルート `config.yaml`）:
    canvas.width / canvas.height / render.frames / render.out_dir / animation.{任意の設定キー}
CLI 引数はこれらより優先する。
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Mapping, Sequence

import yaml

from api import create_effect, list_figures, list_presets, render_loop
from common import settings
from common.logging import setup_default_logging
from engine.core.config import ConfigurationError
from engine.render.pipeline import FrameRenderError
from util.utils import load_config

logger = logging.getLogger(__name__)


def _section(cfg: Mapping[str, Any], name: str) -> dict[str, Any]:
    value = cfg.get(name)
    return dict(value) if isinstance(value, Mapping) else {}


def _parse_set(items: Sequence[str]) -> dict[str, Any]:
    """`key=value` の列を辞書へ（値は YAML スカラーとして解釈）。"""
    out: dict[str, Any] = {}
    for item in items:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"--set expects key=value, got {item!r}")
        value = yaml.safe_load(raw)
        # "#RRGGBB" は YAML ではコメント扱いになるため文字列のまま残す
        if value is None and raw.strip() not in ("", "~", "null"):
            value = raw.strip()
        out[key.strip()] = value
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render one loop of a phase-animated figure.")
    parser.add_argument("--figure", default="tree_of_life", help="registered figure name")
    parser.add_argument("--preset", default=None, help="preset name or YAML file")
    parser.add_argument("--frames", type=int, default=None, help="total frames in the loop")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--out", default=None, help="output directory for PNG frames")
    parser.add_argument("--seed", type=int, default=None, help="seed for random easing choices")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="override a config option (repeatable)",
    )
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--list", action="store_true", help="list figures and presets and exit")
    return parser


def _positive(name: str, value: Any) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if n < 1:
        raise ValueError(f"{name} must be >= 1, got {n}")
    return n


def _pick(cli_value: Any, section: Mapping[str, Any], key: str, default: Any) -> Any:
    # 0 を「未指定」と取り違えないよう None のみを欠落扱いにする
    if cli_value is not None:
        return cli_value
    value = section.get(key)
    return default if value is None else value


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    if args.list:
        print("figures:", ", ".join(list_figures()))
        print("presets:", ", ".join(list_presets()))
        return 0

    cfg = load_config()
    canvas = _section(cfg, "canvas")
    render = _section(cfg, "render")
    s = settings.get()

    try:
        width = _positive("width", _pick(args.width, canvas, "width", s.CANVAS_WIDTH))
        height = _positive("height", _pick(args.height, canvas, "height", s.CANVAS_HEIGHT))
        frames = _positive("frames", _pick(args.frames, render, "frames", 60))
        out_dir = _pick(args.out, render, "out_dir", s.OUTPUT_DIR)
        overrides = _section(cfg, "animation")
        overrides.update(_parse_set(args.overrides))
        effect = create_effect(
            args.figure, preset=args.preset, overrides=overrides, seed=args.seed
        )
    except (KeyError, ValueError, ConfigurationError, OSError, yaml.YAMLError) as e:
        logger.error("invalid configuration: %s", e)
        return 2

    logger.info(
        "rendering %s (%d frames, %dx%d) -> %s",
        effect.geometry_metadata()["name"],
        frames,
        width,
        height,
        out_dir,
    )
    try:
        asyncio.run(
            render_loop(effect, frames, width=width, height=height, out_dir=out_dir, keep=False)
        )
    except FrameRenderError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
