import asyncio

import numpy as np
import pytest

from api import (
    FrameRenderError,
    PhaseAnimatedEffect,
    build_config,
    create_effect,
    render_frame,
    render_loop,
)
from engine.core.phases import Phase
from engine.render.raster import RasterLayer
from shapes import build_figure
from tests._utils.recording import RecordingCanvasFactory


@pytest.mark.smoke
def test_create_effect_by_name():
    effect = create_effect("tree_of_life", preset="minimalist")
    assert isinstance(effect, PhaseAnimatedEffect)
    assert effect.geometry_metadata()["node_count"] == 10


def test_overrides_win_over_preset():
    cfg = build_config("minimalist", {"nodeSize": 5})
    assert cfg.get("node_size") == 5


def test_seed_makes_random_easings_reproducible():
    a = build_config("kundalini_awakening", seed=42)
    b = build_config("kundalini_awakening", seed=42)
    assert dict(a.easings) == dict(b.easings)


def test_mapping_and_yaml_presets(tmp_path):
    assert build_config({"scale": 0.5}).get("scale") == 0.5
    path = tmp_path / "mine.yaml"
    path.write_text("scale: 0.75\nradianceEasing: linear\n", encoding="utf-8")
    cfg = build_config(str(path))
    assert cfg.get("scale") == 0.75
    assert cfg.easing_for(Phase.RADIANCE) == "linear"


def test_bad_yaml_preset(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        build_config(path)


def test_figure_instance_is_accepted():
    fig = build_figure("chakra_mandala", x=0.4)
    effect = create_effect(fig)
    assert effect.figure is fig


def _pixels(layers):
    return [layer.tobytes() for layer in layers]


@pytest.mark.integration
def test_render_loop_writes_frames(tmp_path):
    effect = create_effect("chakra_mandala", preset="cinematic")
    layers = asyncio.run(
        render_loop(effect, 5, width=64, height=64, out_dir=tmp_path, keep=True)
    )
    assert len(layers) == 5
    assert sorted(p.name for p in tmp_path.glob("*.png")) == [
        f"frame_000{i}.png" for i in range(5)
    ]
    # 何かしら描かれている
    assert all(layer.to_array()[..., 3].max() > 0 for layer in layers)


@pytest.mark.integration
def test_frames_are_order_independent():
    effect = create_effect("tree_of_life", preset="ethereal", seed=1)
    total = 8
    in_order = asyncio.run(render_loop(effect, total, width=48, height=48))

    async def shuffled_parallel():
        order = [5, 0, 7, 2, 6, 1, 4, 3]
        layers = await asyncio.gather(
            *(render_frame(effect, i, total, width=48, height=48) for i in order)
        )
        return dict(zip(order, layers))

    by_index = asyncio.run(shuffled_parallel())
    assert _pixels(in_order) == _pixels([by_index[i] for i in range(total)])


def test_render_loop_requires_frames():
    effect = create_effect("tree_of_life")
    with pytest.raises(ValueError):
        asyncio.run(render_loop(effect, 0, width=8, height=8))
    with pytest.raises(ValueError):
        asyncio.run(render_loop(effect, -3, width=8, height=8))
    with pytest.raises(ValueError):
        asyncio.run(render_loop(effect, 2, width=0, height=8))


def test_render_loop_releases_layers_once_saved(tmp_path):
    effect = create_effect("tree_of_life")
    layers = asyncio.run(render_loop(effect, 3, width=16, height=16, out_dir=tmp_path))
    assert layers == []
    assert len(list(tmp_path.glob("frame_*.png"))) == 3


def test_failed_frame_leaves_target_untouched():
    effect = create_effect("tree_of_life", canvas_factory=RecordingCanvasFactory(fail_on="draw_line"))
    layer = RasterLayer.blank(16, 16)
    with pytest.raises(FrameRenderError):
        asyncio.run(effect.invoke(layer, 0, 4))
    assert np.count_nonzero(layer.to_array()) == 0
