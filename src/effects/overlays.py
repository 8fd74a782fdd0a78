"""
どこで: `effects.overlays`
何を: エネルギーパルス/ミスティックシンボルの描画拡張点（種別 enum によるタグ付きディスパッチ）。
なぜ: 基底エンジンは拡張点のみを持ち、具体的な描画は利用側が種別ごとに差し込むため。

- 既定では全種別が no-op。
- 各種別は設定フラグ（`enable_energy_pulses` / `enable_mystic_symbols`）が真のときだけ呼ばれる。
- 呼び出し順は `OVERLAY_ORDER`（パルス → シンボル）で固定。
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Awaitable, Callable, Mapping, Sequence

import numpy as np

from common.types import PathConnection
from engine.core.synthesis import FrameParameters
from shapes.base import GeometryNode

if TYPE_CHECKING:  # 実行時依存を避けるための型ヒントのみ
    from engine.render.surface import Canvas

logger = logging.getLogger(__name__)


class OverlayKind(enum.Enum):
    ENERGY_PULSES = "energy_pulses"
    MYSTIC_SYMBOLS = "mystic_symbols"

    @property
    def flag(self) -> str:
        """有効化フラグの設定キー。"""
        return f"enable_{self.value}"


OVERLAY_ORDER: tuple[OverlayKind, ...] = (OverlayKind.ENERGY_PULSES, OverlayKind.MYSTIC_SYMBOLS)


@dataclass(frozen=True)
class OverlayContext:
    """オーバーレイ描画に渡す 1 フレームぶんの文脈。"""

    canvas: "Canvas"
    width: int
    height: int
    params: FrameParameters
    nodes: Sequence[GeometryNode]
    pixels: np.ndarray  # (N, 2) ノードのピクセル座標
    paths: Sequence[PathConnection]


OverlayRenderer = Callable[[OverlayContext], Awaitable[None]]


async def _noop(ctx: OverlayContext) -> None:
    return None


def normalize_overlays(
    overlays: Mapping[OverlayKind | str, OverlayRenderer] | None,
) -> dict[OverlayKind, OverlayRenderer]:
    """キー（enum または "energy_pulses" 等の文字列）を `OverlayKind` に揃える。"""
    out: dict[OverlayKind, OverlayRenderer] = {}
    for key, fn in (overlays or {}).items():
        kind = key if isinstance(key, OverlayKind) else OverlayKind(str(key).lower())
        if not callable(fn):
            raise TypeError(f"overlay renderer for {kind.value} must be callable: got {fn!r}")
        out[kind] = fn
    return out


def enabled_overlays(params: FrameParameters) -> list[OverlayKind]:
    return [kind for kind in OVERLAY_ORDER if bool(params.get(kind.flag, False))]


async def render_overlays(
    overlays: Mapping[OverlayKind, OverlayRenderer], ctx: OverlayContext
) -> None:
    """有効な種別の描画関数を順に await する（未登録は no-op）。"""
    for kind in enabled_overlays(ctx.params):
        fn = overlays.get(kind, _noop)
        logger.debug("overlay %s", kind.value)
        await fn(ctx)


__all__ = [
    "OVERLAY_ORDER",
    "OverlayContext",
    "OverlayKind",
    "OverlayRenderer",
    "enabled_overlays",
    "normalize_overlays",
    "render_overlays",
]
