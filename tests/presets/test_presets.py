import pytest

from engine.core.config import AnimationConfig, ConfigurationError, resolve_random_choices
from engine.core.phases import Phase
from presets import get_preset, is_preset_registered, list_presets, register_preset
from presets.registry import unregister_preset

BUILTIN = [
    "alchemical_transmutation",
    "celestial_void",
    "chakra_spin",
    "cinematic",
    "diagnostic_all_features",
    "ethereal",
    "geometric",
    "hermetic_ascent",
    "kundalini_awakening",
    "minimalist",
    "operator_overload",
    "quantum",
]


@pytest.mark.smoke
def test_builtin_presets_listed():
    assert set(BUILTIN) <= set(list_presets())


@pytest.mark.parametrize("name", BUILTIN)
def test_every_preset_builds_after_resolving_choices(name):
    cfg = AnimationConfig.from_mapping(resolve_random_choices(get_preset(name), seed=0))
    assert cfg.boundaries.awakening == 0.0


def test_lookup_is_normalized():
    assert get_preset("KundaliniAwakening") == get_preset("kundalini_awakening")


def test_get_preset_returns_a_copy():
    p = get_preset("minimalist")
    p["node_size"] = 999
    assert get_preset("minimalist")["node_size"] == 18


def test_minimalist_values():
    cfg = AnimationConfig.from_mapping(get_preset("minimalist"))
    assert cfg.boundaries.starts() == (0.0, 0.22, 0.62, 0.86)
    assert cfg.get("path_color") == "#A9A9A9"
    assert "kether_glow" in cfg.families


def test_chakra_presets_carry_easing_choices():
    raw = get_preset("celestial_void")
    assert isinstance(raw["descent_easing"], list)
    with pytest.raises(ConfigurationError):
        AnimationConfig.from_mapping(raw)


def test_register_and_duplicate():
    register_preset("test_only_dim", {"layer_opacity": 0.2})
    try:
        assert is_preset_registered("testOnlyDim")
        with pytest.raises(ValueError):
            register_preset("test_only_dim", {"layer_opacity": 0.3})
    finally:
        unregister_preset("test_only_dim")


def test_unknown_preset():
    with pytest.raises(KeyError):
        get_preset("does_not_exist")


def test_chakra_spin_values():
    cfg = AnimationConfig.from_mapping(get_preset("ChakraSpin"))
    assert cfg.boundaries.starts() == (0.0, 0.15, 0.50, 0.80)
    assert cfg.get("node_color") == "#FFD700"
    assert cfg.curve("kether_glow", Phase.RADIANCE).start == 3.0
    assert cfg.easings[Phase.RADIANCE] == "smootherstep"
