"""生命の樹向けプリセット（minimalist / cinematic / ethereal / geometric / quantum ほか 9 種）。"""

from __future__ import annotations

from .registry import register_preset

MINIMALIST = register_preset(
    "minimalist",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.22,
        "phase_radiance_start": 0.62,
        "phase_descent_start": 0.86,
        "transition_zone_width": 0.05,
        # cool gray paths, teal accents, pale glow
        "path_color": "#A9A9A9",
        "node_color": "#20B2AA",
        "glow_color": "#D3D3D3",
        "awakening_node_alpha": 0.32,
        "awakening_node_alpha_start": 0.1,
        "awakening_node_alpha_end": 0.48,
        "awakening_path_intensity": 0.12,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.3,
        "awakening_path_anim_speed": 0.5,
        "awakening_easing": "easeInCubic",
        "ascension_node_alpha": 0.82,
        "ascension_node_alpha_start": 0.48,
        "ascension_node_alpha_end": 0.95,
        "ascension_path_intensity": 0.92,
        "ascension_path_intensity_start": 0.3,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 1.6,
        "ascension_easing": "easeInOutCubic",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 0.95,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 1.0,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 1.0,
        "radiance_kether_glow": 1.8,
        "radiance_path_anim_speed": 1.2,
        "radiance_easing": "smoothstep",
        "descent_node_alpha": 0.48,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.1,
        "descent_path_intensity": 0.18,
        "descent_path_intensity_start": 1.0,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 0.8,
        "descent_easing": "easeOutQuart",
        "path_thickness": 1.5,
        "path_size_scale": 0.9,
        "node_size": 18,
        "node_glow_size": 20,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 0.95,
        "description": "Clean, refined aesthetic letting pure geometry dominate",
    },
)

CINEMATIC = register_preset(
    "cinematic",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.20,
        "phase_radiance_start": 0.60,
        "phase_descent_start": 0.85,
        "transition_zone_width": 0.05,
        # crimson paths, golden accents, amber glow
        "path_color": "#DC143C",
        "node_color": "#FFD700",
        "glow_color": "#FFA500",
        "awakening_node_alpha": 0.35,
        "awakening_node_alpha_start": 0.1,
        "awakening_node_alpha_end": 0.5,
        "awakening_path_intensity": 0.15,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.4,
        "awakening_path_anim_speed": 0.6,
        "awakening_easing": "easeInCubic",
        "ascension_node_alpha": 0.85,
        "ascension_node_alpha_start": 0.5,
        "ascension_node_alpha_end": 0.95,
        "ascension_path_intensity": 0.95,
        "ascension_path_intensity_start": 0.4,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 2.0,
        "ascension_easing": "easeInOutCubic",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 0.95,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 1.0,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 1.0,
        "radiance_kether_glow": 2.5,
        "radiance_path_anim_speed": 1.8,
        "radiance_easing": "smoothstep",
        "descent_node_alpha": 0.5,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.15,
        "descent_path_intensity": 0.2,
        "descent_path_intensity_start": 1.0,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 1.0,
        "descent_easing": "easeOutQuart",
        "path_thickness": 2.5,
        "path_size_scale": 1.1,
        "node_size": 22,
        "node_glow_size": 28,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 1.0,
        "description": "Drama and visual spectacle",
    },
)

ETHEREAL = register_preset(
    "ethereal",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.25,
        "phase_radiance_start": 0.65,
        "phase_descent_start": 0.88,
        "transition_zone_width": 0.05,
        # lavender paths, opal accents, pearl glow
        "path_color": "#DDA0DD",
        "node_color": "#F0E68C",
        "glow_color": "#E6E6FA",
        "awakening_node_alpha": 0.28,
        "awakening_node_alpha_start": 0.1,
        "awakening_node_alpha_end": 0.45,
        "awakening_path_intensity": 0.12,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.3,
        "awakening_path_anim_speed": 0.5,
        "awakening_easing": "easeInCubic",
        "ascension_node_alpha": 0.78,
        "ascension_node_alpha_start": 0.45,
        "ascension_node_alpha_end": 0.95,
        "ascension_path_intensity": 0.88,
        "ascension_path_intensity_start": 0.3,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 1.2,
        "ascension_easing": "easeOutCubic",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 0.95,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 0.98,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 0.95,
        "radiance_kether_glow": 2.2,
        "radiance_path_anim_speed": 1.0,
        "radiance_easing": "smoothstep",
        "descent_node_alpha": 0.45,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.1,
        "descent_path_intensity": 0.18,
        "descent_path_intensity_start": 0.95,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 0.8,
        "descent_easing": "easeOutQuart",
        "path_thickness": 2.0,
        "path_size_scale": 1.0,
        "node_size": 20,
        "node_glow_size": 25,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 1.0,
        "description": "Soft, luminous and dreamlike",
    },
)

GEOMETRIC = register_preset(
    "geometric",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.18,
        "phase_radiance_start": 0.55,
        "phase_descent_start": 0.82,
        "transition_zone_width": 0.05,
        # white paths, cobalt accents, silver glow
        "path_color": "#F0F8FF",
        "node_color": "#0047AB",
        "glow_color": "#C0C0C0",
        "awakening_node_alpha": 0.4,
        "awakening_node_alpha_start": 0.15,
        "awakening_node_alpha_end": 0.55,
        "awakening_path_intensity": 0.2,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.4,
        "awakening_path_anim_speed": 0.8,
        "awakening_easing": "easeInQuart",
        "ascension_node_alpha": 0.9,
        "ascension_node_alpha_start": 0.55,
        "ascension_node_alpha_end": 0.98,
        "ascension_path_intensity": 1.0,
        "ascension_path_intensity_start": 0.4,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 2.5,
        "ascension_easing": "easeInOutCubic",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 0.98,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 1.0,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 1.0,
        "radiance_kether_glow": 2.0,
        "radiance_path_anim_speed": 2.2,
        "radiance_easing": "smoothstep",
        "descent_node_alpha": 0.6,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.2,
        "descent_path_intensity": 0.25,
        "descent_path_intensity_start": 1.0,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 1.2,
        "descent_easing": "easeOutCubic",
        "path_thickness": 1.5,
        "path_size_scale": 0.95,
        "node_size": 18,
        "node_glow_size": 22,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 1.0,
        "description": "Mathematical precision with maximum geometric pattern complexity",
    },
)

QUANTUM = register_preset(
    "quantum",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.16,
        "phase_radiance_start": 0.52,
        "phase_descent_start": 0.84,
        "transition_zone_width": 0.05,
        # electric cyan paths, golden accents, cyan glow
        "path_color": "#00E5FF",
        "node_color": "#FFD700",
        "glow_color": "#00E5FF",
        "awakening_node_alpha": 0.38,
        "awakening_node_alpha_start": 0.15,
        "awakening_node_alpha_end": 0.55,
        "awakening_path_intensity": 0.18,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.35,
        "awakening_path_anim_speed": 0.8,
        "awakening_easing": "easeInQuart",
        "ascension_node_alpha": 0.88,
        "ascension_node_alpha_start": 0.55,
        "ascension_node_alpha_end": 0.95,
        "ascension_path_intensity": 0.98,
        "ascension_path_intensity_start": 0.35,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 2.8,
        "ascension_easing": "easeInOutCubic",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 0.95,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 1.0,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 1.0,
        "radiance_kether_glow": 2.3,
        "radiance_path_anim_speed": 2.5,
        "radiance_easing": "smoothstep",
        "descent_node_alpha": 0.55,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.2,
        "descent_path_intensity": 0.22,
        "descent_path_intensity_start": 1.0,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 1.0,
        "descent_easing": "easeOutCubic",
        "path_thickness": 2,
        "path_size_scale": 1.0,
        "node_size": 20,
        "node_glow_size": 25,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 1.0,
        "description": "Superposition visualization with complex interference patterns",
    },
)

HERMETIC_ASCENT = register_preset(
    "hermetic_ascent",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.20,
        "phase_radiance_start": 0.60,
        "phase_descent_start": 0.85,
        "transition_zone_width": 0.05,
        # slate blue paths, silver accents, indigo glow
        "path_color": "#6A5ACD",
        "node_color": "#C0C0C0",
        "glow_color": "#4B0082",
        "awakening_node_alpha": 0.3,
        "awakening_node_alpha_start": 0.1,
        "awakening_node_alpha_end": 0.5,
        "awakening_path_intensity": 0.1,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.3,
        "awakening_path_anim_speed": 0.5,
        "awakening_easing": "easeInCubic",
        "ascension_node_alpha": 0.8,
        "ascension_node_alpha_start": 0.5,
        "ascension_node_alpha_end": 0.95,
        "ascension_path_intensity": 0.9,
        "ascension_path_intensity_start": 0.3,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 1.5,
        "ascension_easing": "linear",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 0.95,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 1.0,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 1.0,
        "radiance_kether_glow": 2.0,
        "radiance_path_anim_speed": 1.3,
        "radiance_easing": "smoothstep",
        "descent_node_alpha": 0.5,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.15,
        "descent_path_intensity": 0.2,
        "descent_path_intensity_start": 1.0,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 0.9,
        "descent_easing": "easeOutQuart",
        "path_thickness": 2,
        "path_size_scale": 1.0,
        "node_size": 20,
        "node_glow_size": 25,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 1.0,
        "description": "Classical Kabbalistic timing with balanced visual depth",
    },
)

ALCHEMICAL_TRANSMUTATION = register_preset(
    "alchemical_transmutation",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.30,
        "phase_radiance_start": 0.70,
        "phase_descent_start": 0.90,
        "transition_zone_width": 0.05,
        # emerald paths, copper accents, forest glow
        "path_color": "#50C878",
        "node_color": "#B87333",
        "glow_color": "#228B22",
        "awakening_node_alpha": 0.25,
        "awakening_node_alpha_start": 0.08,
        "awakening_node_alpha_end": 0.42,
        "awakening_path_intensity": 0.08,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.25,
        "awakening_path_anim_speed": 0.4,
        "awakening_easing": "smoothstep",
        "ascension_node_alpha": 0.75,
        "ascension_node_alpha_start": 0.42,
        "ascension_node_alpha_end": 0.92,
        "ascension_path_intensity": 0.85,
        "ascension_path_intensity_start": 0.25,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 0.8,
        "ascension_easing": "easeOutCubic",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 0.92,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 0.95,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 0.98,
        "radiance_kether_glow": 2.5,
        "radiance_path_anim_speed": 0.9,
        "radiance_easing": "smoothstep",
        "descent_node_alpha": 0.4,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.1,
        "descent_path_intensity": 0.15,
        "descent_path_intensity_start": 0.98,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 0.6,
        "descent_easing": "easeOutQuart",
        "path_thickness": 2,
        "path_size_scale": 1.0,
        "node_size": 20,
        "node_glow_size": 25,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 1.0,
        "description": "Slow meditative pacing with rich visual complexity",
    },
)

OPERATOR_OVERLOAD = register_preset(
    "operator_overload",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.12,
        "phase_radiance_start": 0.42,
        "phase_descent_start": 0.88,
        "transition_zone_width": 0.05,
        # white paths, magenta accents, violet glow
        "path_color": "#FFFFFF",
        "node_color": "#FF00FF",
        "glow_color": "#8B00FF",
        "awakening_node_alpha": 0.45,
        "awakening_node_alpha_start": 0.15,
        "awakening_node_alpha_end": 0.65,
        "awakening_path_intensity": 0.35,
        "awakening_path_intensity_start": 0.1,
        "awakening_path_intensity_end": 0.5,
        "awakening_path_anim_speed": 1.2,
        "awakening_easing": "easeInCubic",
        "ascension_node_alpha": 0.95,
        "ascension_node_alpha_start": 0.65,
        "ascension_node_alpha_end": 1.0,
        "ascension_path_intensity": 1.0,
        "ascension_path_intensity_start": 0.5,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 3.0,
        "ascension_easing": "easeInOutCubic",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 1.0,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 1.0,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 1.0,
        "radiance_kether_glow": 3.0,
        "radiance_path_anim_speed": 2.5,
        "radiance_easing": "smoothstep",
        "descent_node_alpha": 0.4,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.0,
        "descent_path_intensity": 0.15,
        "descent_path_intensity_start": 1.0,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 1.0,
        "descent_easing": "easeOutQuart",
        "path_thickness": 3,
        "path_size_scale": 1.2,
        "node_size": 28,
        "node_glow_size": 35,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 1.0,
        "description": "Maximum complexity with every detail system engaged at once",
    },
)

CHAKRA_SPIN = register_preset(
    "chakra_spin",
    {
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.15,
        "phase_radiance_start": 0.50,
        "phase_descent_start": 0.80,
        "transition_zone_width": 0.05,
        # magenta paths, golden accents, deep pink glow
        "path_color": "#FF00FF",
        "node_color": "#FFD700",
        "glow_color": "#FF1493",
        "awakening_node_alpha": 0.4,
        "awakening_node_alpha_start": 0.2,
        "awakening_node_alpha_end": 0.6,
        "awakening_path_intensity": 0.15,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.35,
        "awakening_path_anim_speed": 1.2,
        "awakening_easing": "easeInQuart",
        "ascension_node_alpha": 0.9,
        "ascension_node_alpha_start": 0.6,
        "ascension_node_alpha_end": 0.98,
        "ascension_path_intensity": 1.0,
        "ascension_path_intensity_start": 0.35,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 3.0,
        "ascension_easing": "easeInOutCubic",
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 0.98,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 1.0,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 1.0,
        "radiance_kether_glow": 3.0,
        "radiance_path_anim_speed": 2.8,
        "radiance_easing": "smootherstep",
        "descent_node_alpha": 0.6,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.2,
        "descent_path_intensity": 0.25,
        "descent_path_intensity_start": 1.0,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 1.5,
        "descent_easing": "easeOutCubic",
        "path_thickness": 2.2,
        "path_size_scale": 1.05,
        "node_size": 24,
        "node_glow_size": 32,
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "layer_opacity": 1.0,
        "description": "Energetic and rapid with intense visual detail",
    },
)
