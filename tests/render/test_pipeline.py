import asyncio

import pytest

from effects.overlays import OverlayKind
from engine.core.config import AnimationConfig
from engine.render.pipeline import (
    PATH_OUTER_THICKNESS,
    RING_THICKNESS,
    FrameRenderError,
    PhaseAnimatedEffect,
    RenderStage,
)
from shapes import BaseFigure, GeometryContractError, GeometryNode, StaticFigure, build_figure

from tests._utils.recording import RecordingCanvasFactory, RecordingLayer


def _two_node_figure(paths=((0, 1),)) -> StaticFigure:
    return StaticFigure(
        nodes=(
            GeometryNode(0, "left", 0.25, 0.5, color="#FF0000"),
            GeometryNode(1, "right", 0.75, 0.5),
        ),
        paths=tuple(paths),
        name="pair",
    )


def _effect(factory, figure=None, **options) -> PhaseAnimatedEffect:
    return PhaseAnimatedEffect(
        figure or _two_node_figure(),
        AnimationConfig.from_mapping(options),
        canvas_factory=factory,
    )


@pytest.mark.smoke
def test_stage_order_and_composite(recording_factory):
    effect = _effect(recording_factory)
    layer = RecordingLayer(100, 80)
    asyncio.run(effect.invoke(layer, 0, 10))

    canvas = recording_factory.last
    assert (canvas.width, canvas.height) == (100, 80)
    assert canvas.names() == [
        "draw_filled_polygon",
        "draw_ring",
        "draw_filled_polygon",
        "draw_ring",
        "draw_line",
        "to_layer",
    ]
    assert len(layer.composited) == 1
    assert [s.value for s in RenderStage] == [
        "allocate",
        "draw_nodes",
        "draw_paths",
        "overlays",
        "composite",
    ]


def test_node_and_path_arguments(recording_factory):
    effect = _effect(recording_factory, node_size=12, node_glow_size=16, path_thickness=2.0,
                     path_size_scale=1.5)
    layer = RecordingLayer(100, 100)
    asyncio.run(effect.invoke(layer, 5, 11))  # progress 0.5 → ascension
    params = effect.frame_parameters(5, 11)
    calls = recording_factory.last.calls

    name, (radius, center, sides, rotation, color, alpha) = calls[0]
    assert (radius, center, sides, color) == (12.0, (25.0, 50.0), 6, "#FF0000")
    assert alpha == pytest.approx(params.node_alpha)

    name, (center, radius, thickness, color, rotation, alpha) = calls[1]
    assert (radius, thickness, color) == (16.0, RING_THICKNESS, "#FFFF00")
    assert alpha == pytest.approx(params.node_alpha * 0.5)

    # 2 つ目のノードは色指定なし → node_color
    assert calls[2][1][4] == "#FFFFFF"

    name, (a, b, thickness, color, outer, secondary, intensity) = calls[4]
    assert (a, b) == ((25.0, 50.0), (75.0, 50.0))
    assert thickness == pytest.approx(3.0)
    assert outer == PATH_OUTER_THICKNESS
    assert secondary == "#FFFF00"
    assert intensity == pytest.approx(params.path_intensity)


def test_layer_opacity_applied_before_composite(recording_factory):
    effect = _effect(recording_factory, layer_opacity=0.4)
    layer = RecordingLayer()
    asyncio.run(effect.invoke(layer, 3, 10))
    rendered = layer.composited[0]
    assert rendered.opacity == pytest.approx(0.4)


def test_missing_nodes_are_skipped(recording_factory):
    effect = _effect(recording_factory, _two_node_figure(paths=[(0, 1), (1, 7), (-1, 0)]))
    asyncio.run(effect.invoke(RecordingLayer(), 0, 2))
    assert recording_factory.last.names().count("draw_line") == 1


def test_overlays_gated_by_flags(recording_factory):
    seen: list[tuple[str, float]] = []

    async def pulses(ctx):
        seen.append(("pulses", ctx.params.progress))
        await ctx.canvas.draw_ring(tuple(ctx.pixels[0]), 2.0, 1.0, "#123456", 0.0, 1.0)

    async def symbols(ctx):
        seen.append(("symbols", ctx.params.progress))

    figure = _two_node_figure()
    cfg = AnimationConfig.from_mapping(enable_mystic_symbols=False)
    effect = PhaseAnimatedEffect(
        figure,
        cfg,
        overlays={OverlayKind.ENERGY_PULSES: pulses, "mystic_symbols": symbols},
        canvas_factory=recording_factory,
    )
    asyncio.run(effect.invoke(RecordingLayer(), 1, 3))
    assert seen == [("pulses", 0.5)]
    assert recording_factory.last.names()[-2:] == ["draw_ring", "to_layer"]


def test_overlays_default_to_noop(recording_factory):
    effect = _effect(recording_factory)
    asyncio.run(effect.invoke(RecordingLayer(), 0, 1))
    assert recording_factory.last.names()[-1] == "to_layer"


def test_invalid_overlay_key_is_rejected(recording_factory):
    with pytest.raises(ValueError):
        PhaseAnimatedEffect(
            _two_node_figure(),
            AnimationConfig.from_mapping(),
            overlays={"sparkles": lambda ctx: None},
            canvas_factory=recording_factory,
        )


@pytest.mark.parametrize(
    "fail_on, stage",
    [
        ("allocate", RenderStage.ALLOCATE),
        ("draw_filled_polygon", RenderStage.DRAW_NODES),
        ("draw_ring", RenderStage.DRAW_NODES),
        ("draw_line", RenderStage.DRAW_PATHS),
        ("to_layer", RenderStage.COMPOSITE),
    ],
)
def test_surface_failure_aborts_frame_without_composite(fail_on, stage):
    factory = RecordingCanvasFactory(fail_on=fail_on)
    effect = _effect(factory)
    layer = RecordingLayer()
    with pytest.raises(FrameRenderError) as excinfo:
        asyncio.run(effect.invoke(layer, 4, 10))
    err = excinfo.value
    assert err.frame_index == 4
    assert err.stage is stage
    assert err.__cause__ is err.original
    assert layer.composited == []
    assert layer.calls == []


def test_geometry_contract_error_propagates_unwrapped(recording_factory):
    class NoPaths(BaseFigure):
        def node_positions(self):
            return (GeometryNode(0, "solo", 0.5, 0.5),)

    effect = PhaseAnimatedEffect(
        NoPaths(), AnimationConfig.from_mapping(), canvas_factory=recording_factory
    )
    layer = RecordingLayer()
    with pytest.raises(GeometryContractError, match="path_connections"):
        asyncio.run(effect.invoke(layer, 0, 10))
    assert layer.composited == []


def test_surface_size_falls_back_to_settings(recording_factory, monkeypatch):
    from common import settings

    monkeypatch.setattr(settings.get(), "CANVAS_WIDTH", 320)
    monkeypatch.setattr(settings.get(), "CANVAS_HEIGHT", 240)

    class SizelessLayer:
        composited: list = []

        async def set_opacity(self, value):
            pass

        async def composite_over(self, layer):
            self.composited.append(layer)

    effect = _effect(recording_factory)
    asyncio.run(effect.invoke(SizelessLayer(), 0, 10))
    assert (recording_factory.last.width, recording_factory.last.height) == (320, 240)


def test_frame_parameters_and_metadata(recording_factory):
    effect = _effect(recording_factory, figure=build_figure("tree_of_life"))
    params = effect.frame_parameters(9, 10)
    assert params.progress == 1.0
    assert params.phase.value == "descent"
    assert effect.geometry_metadata()["path_count"] == 22
    # 計算だけでは描画面を確保しない
    assert recording_factory.canvases == []
