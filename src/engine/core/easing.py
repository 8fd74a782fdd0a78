"""
どこで: `engine.core.easing`
何を: 正規化時間 t∈[0,1] を補正後の時間へ写すイージング関数群と、名前指定の `lerp`。
なぜ: フェーズ曲線・フェーズ間ブレンドの双方から同一の名前解決で参照するため。

設計方針:
- 純粋・決定的。副作用なし。
- 名前は `easeInCubic` / `ease_in_cubic` のどちらでも解決（キーは正規化して登録）。
- 未知の名前は linear へ黙ってフォールバックする（DEBUG ログのみ）。
- `ease_in_out_elastic` と `ease_in_out_back` は意図的に [0,1] をはみ出す。
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from common.base_registry import BaseRegistry, normalize_key

logger = logging.getLogger(__name__)

EasingFn = Callable[[float], float]

_easing_registry = BaseRegistry()
easing = _easing_registry.register

LINEAR = "linear"
SMOOTHSTEP = "smoothstep"


@easing()
def linear(t: float) -> float:
    return t


# ---- power 系 -------------------------------------------------------------


@easing()
def ease_in_cubic(t: float) -> float:
    return t * t * t


@easing()
def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


@easing()
def ease_in_out_cubic(t: float) -> float:
    return 4.0 * t * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


@easing()
def ease_in_quart(t: float) -> float:
    return t * t * t * t


@easing()
def ease_out_quart(t: float) -> float:
    return 1.0 - (1.0 - t) ** 4


@easing()
def ease_in_out_quart(t: float) -> float:
    return 8.0 * t**4 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 4 / 2.0


@easing()
def ease_in_quint(t: float) -> float:
    return t**5


@easing()
def ease_out_quint(t: float) -> float:
    return 1.0 - (1.0 - t) ** 5


@easing()
def ease_in_out_quint(t: float) -> float:
    return 16.0 * t**5 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 5 / 2.0


# ---- step 系 --------------------------------------------------------------


@easing()
def smoothstep(t: float) -> float:
    """t²(3−2t)。両端で微分 0（フェーズ間ブレンドに使用）。"""
    return t * t * (3.0 - 2.0 * t)


@easing()
def smootherstep(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


# ---- expo 系（端点は 2^-∞ を避けるため明示） --------------------------------


@easing()
def ease_in_expo(t: float) -> float:
    return 0.0 if t == 0.0 else 2.0 ** (10.0 * t - 10.0)


@easing()
def ease_out_expo(t: float) -> float:
    return 1.0 if t == 1.0 else 1.0 - 2.0 ** (-10.0 * t)


# ---- overshoot 系 ---------------------------------------------------------


@easing()
def ease_in_out_elastic(t: float) -> float:
    c5 = (2.0 * math.pi) / 4.5
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if t < 0.5:
        return -(2.0 ** (20.0 * t - 10.0) * math.sin((t * 10.0 - 11.125) * c5)) / 2.0
    return (2.0 ** (-20.0 * t + 10.0) * math.sin((t * 10.0 - 11.125) * c5)) / 2.0 + 1.0


@easing()
def ease_out_elastic(t: float) -> float:
    c4 = (2.0 * math.pi) / 4.5
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * c4) + 1.0


@easing()
def ease_in_out_back(t: float) -> float:
    c1 = 1.70158
    c2 = c1 * 1.525
    if t < 0.5:
        return ((2.0 * t) ** 2 * ((c2 + 1.0) * 2.0 * t - c2)) / 2.0
    return ((2.0 * t - 2.0) ** 2 * ((c2 + 1.0) * (t * 2.0 - 2.0) + c2) + 2.0) / 2.0


# 出力が [0,1] をはみ出すもの（バウンス/オーバーシュート演出）
OVERSHOOTING_EASINGS = frozenset({"ease_in_out_elastic", "ease_out_elastic", "ease_in_out_back"})


def get_easing(name: str | None) -> EasingFn:
    """名前からイージング関数を解決する。未知/空の名前は linear。"""
    if not name:
        return linear
    try:
        return _easing_registry.get(name)
    except (KeyError, TypeError, ValueError):
        logger.debug("unknown easing %r, falling back to linear", name)
        return linear


def is_known_easing(name: str) -> bool:
    try:
        return _easing_registry.is_registered(name)
    except (TypeError, ValueError):
        return False


def canonical_name(name: str | None) -> str:
    """正規化済みの登録名を返す（未知なら "linear"）。"""
    if name and is_known_easing(name):
        return normalize_key(name)
    return LINEAR


def list_easings() -> list[str]:
    """登録済みイージング名（正規化キー）をソートして返す。"""
    return sorted(_easing_registry.list_all())


def ease(t: float, name: str | None = LINEAR) -> float:
    """`name` のイージングを t に適用する（t の clamp は行わない）。"""
    return get_easing(name)(float(t))


def lerp(start: float, end: float, t: float, easing_name: str | None = LINEAR) -> float:
    """t を [0,1] に clamp してからイージングし、`start + (end-start)·ease(t)` を返す。"""
    u = max(0.0, min(1.0, float(t)))
    return start + (end - start) * get_easing(easing_name)(u)


__all__ = [
    "EasingFn",
    "LINEAR",
    "SMOOTHSTEP",
    "OVERSHOOTING_EASINGS",
    "canonical_name",
    "ease",
    "easing",
    "get_easing",
    "is_known_easing",
    "lerp",
    "list_easings",
]
