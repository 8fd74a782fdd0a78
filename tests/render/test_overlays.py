import asyncio

import numpy as np
import pytest

from effects.overlays import (
    OVERLAY_ORDER,
    OverlayContext,
    OverlayKind,
    enabled_overlays,
    normalize_overlays,
    render_overlays,
)
from engine.core.config import AnimationConfig
from engine.core.synthesis import synthesize


def _ctx(**options) -> OverlayContext:
    params = synthesize(0.7, AnimationConfig.from_mapping(options))
    return OverlayContext(None, 10, 10, params, (), np.zeros((0, 2)), ())


def test_kinds_and_flags():
    assert OVERLAY_ORDER == (OverlayKind.ENERGY_PULSES, OverlayKind.MYSTIC_SYMBOLS)
    assert OverlayKind.MYSTIC_SYMBOLS.flag == "enable_mystic_symbols"


def test_enabled_overlays_follow_flags():
    assert enabled_overlays(_ctx().params) == list(OVERLAY_ORDER)
    assert enabled_overlays(_ctx(enable_energy_pulses=False).params) == [
        OverlayKind.MYSTIC_SYMBOLS
    ]


def test_normalize_overlays_accepts_strings():
    async def fn(ctx):
        return None

    out = normalize_overlays({"Energy_Pulses": fn, OverlayKind.MYSTIC_SYMBOLS: fn})
    assert set(out) == set(OVERLAY_ORDER)
    with pytest.raises(TypeError):
        normalize_overlays({"energy_pulses": 3})  # type: ignore[dict-item]


def test_dispatch_runs_in_fixed_order():
    order: list[str] = []

    async def pulses(ctx):
        order.append("pulses")

    async def symbols(ctx):
        order.append("symbols")

    overlays = normalize_overlays({"mystic_symbols": symbols, "energy_pulses": pulses})
    asyncio.run(render_overlays(overlays, _ctx()))
    assert order == ["pulses", "symbols"]


def test_missing_renderers_are_noops():
    asyncio.run(render_overlays({}, _ctx()))
