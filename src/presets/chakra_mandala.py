"""
チャクラ曼荼羅向けプリセット（kundalini_awakening / celestial_void / diagnostic_all_features）。

フェーズ別イージングは指定せず候補リストのまま持つ。
`resolve_random_choices(options, seed)` で 1 回だけ確定させてから構築する。
"""

from __future__ import annotations

from engine.core.config import DEFAULT_EASING_CHOICES

from .registry import register_preset

_EASING_CHOICES = {key: list(values) for key, values in DEFAULT_EASING_CHOICES.items()}

KUNDALINI_AWAKENING = register_preset(
    "kundalini_awakening",
    {
        # extended ascension: the serpent rises root -> crown
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.15,
        "phase_radiance_start": 0.70,
        "phase_descent_start": 0.85,
        "transition_zone_width": 0.05,
        "awakening_node_alpha": 0.3,
        "awakening_node_alpha_start": 0.1,
        "awakening_node_alpha_end": 0.5,
        "ascension_node_alpha": 0.9,
        "ascension_node_alpha_start": 0.5,
        "ascension_node_alpha_end": 1.0,
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 1.0,
        "radiance_node_alpha_end": 1.0,
        "descent_node_alpha": 0.4,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.1,
        "path_color": "#C41E3A",
        "glow_color": "#FF6666",
        "node_size": 22,
        "path_thickness": 1.5,
        "layer_opacity": 1.0,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "description": "Classic kundalini rising from root to crown",
        **_EASING_CHOICES,
    },
)

CELESTIAL_VOID = register_preset(
    "celestial_void",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.20,
        "phase_radiance_start": 0.60,
        "phase_descent_start": 0.85,
        "transition_zone_width": 0.07,
        "awakening_node_alpha": 0.25,
        "awakening_node_alpha_start": 0.05,
        "awakening_node_alpha_end": 0.4,
        "ascension_node_alpha": 0.7,
        "ascension_node_alpha_start": 0.4,
        "ascension_node_alpha_end": 0.85,
        "radiance_node_alpha": 0.9,
        "radiance_node_alpha_start": 0.9,
        "radiance_node_alpha_end": 0.9,
        "descent_node_alpha": 0.25,
        "descent_node_alpha_start": 0.85,
        "descent_node_alpha_end": 0.05,
        "node_color": "#ECF0F1",
        "glow_color": "#ECF0F1",
        "node_size": 20,
        "node_glow_size": 65,
        "path_thickness": 0.5,
        "layer_opacity": 0.8,
        "enable_energy_pulses": False,
        "enable_mystic_symbols": True,
        "description": "Vast, quiet cosmic space with large soft glows",
        **_EASING_CHOICES,
    },
)

# 表示確認用。全オーバーレイを有効化し、不透明度を最大にする
DIAGNOSTIC_ALL_FEATURES = register_preset(
    "diagnostic_all_features",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.25,
        "phase_radiance_start": 0.60,
        "phase_descent_start": 0.85,
        "transition_zone_width": 0.05,
        "node_size": 16,
        "node_glow_size": 30,
        "path_thickness": 1,
        "layer_opacity": 1.0,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "description": "All overlays enabled with maximum visibility for debugging",
        **_EASING_CHOICES,
    },
)
