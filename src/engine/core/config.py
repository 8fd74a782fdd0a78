"""
どこで: `engine.core.config`
何を: フラットな設定マッピングを 1 度だけ正規化・既定値補完・検証し、不変の `AnimationConfig` を作る。
なぜ: フレームごとの合成でキー探索/フォールバックを繰り返さず、構築時に全てを確定させるため。

キー規約（正規化後、スネークケース）:
- フェーズ境界: `phase_awakening_start`(=0.0) / `phase_ascension_start` / `phase_radiance_start` /
  `phase_descent_start`（旧名 `phaseDescentstart` も受理）。
- 遷移ゾーン幅: `transition_zone_width`。
- フェーズ別イージング: `{phase}_easing`。
- アニメーション対象の系列: `{phase}_{family}`（基準値）, `{phase}_{family}_start`, `{phase}_{family}_end`。
- それ以外のキーは解釈せずにそのまま保持する（`options` から参照可能）。

ランダム選択（プリセットの `*_easing: [...]`）はここでは受け付けない。
`resolve_random_choices()` で構築前に 1 回だけ確定させること。
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

import numpy as np

from common.base_registry import normalize_key

from .easing import canonical_name, is_known_easing
from .phases import PHASE_ORDER, Phase, PhaseBoundaries

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """構築時に拒否される設定（境界の逆順、遷移ゾーン幅の過大など）。"""


# 常に合成される系列（既定値 1.0）
BUILTIN_FAMILIES: tuple[str, ...] = ("node_alpha", "path_intensity", "path_anim_speed")
FAMILY_DEFAULT = 1.0

# 旧キー名 → 正規キー名
_KEY_ALIASES = {
    "phase_descentstart": "phase_descent_start",
}

# 構築前にランダム確定させる「選択肢」キーの接尾辞
_CHOICE_SUFFIXES = ("_easing", "_blend_mode")

_FAMILY_RE = re.compile(
    r"^(?P<phase>awakening|ascension|radiance|descent)_(?P<family>.+?)(?:_(?P<edge>start|end))?$"
)

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        # ---- phase timing & transitions ----
        "phase_awakening_start": 0.0,
        "phase_ascension_start": 0.20,
        "phase_radiance_start": 0.60,
        "phase_descent_start": 0.85,
        "transition_zone_width": 0.05,
        # ---- awakening (emergence) ----
        "awakening_node_alpha": 0.3,
        "awakening_node_alpha_start": 0.1,
        "awakening_node_alpha_end": 0.5,
        "awakening_path_intensity": 0.2,
        "awakening_path_intensity_start": 0.0,
        "awakening_path_intensity_end": 0.4,
        "awakening_path_anim_speed": 0.5,
        "awakening_easing": "easeInCubic",
        # ---- ascension (rising) ----
        "ascension_node_alpha": 0.8,
        "ascension_node_alpha_start": 0.5,
        "ascension_node_alpha_end": 1.0,
        "ascension_path_intensity": 0.8,
        "ascension_path_intensity_start": 0.4,
        "ascension_path_intensity_end": 1.0,
        "ascension_path_anim_speed": 2.0,
        "ascension_easing": "easeInOutCubic",
        # ---- radiance (peak) ----
        "radiance_node_alpha": 1.0,
        "radiance_node_alpha_start": 1.0,
        "radiance_node_alpha_end": 1.0,
        "radiance_path_intensity": 1.0,
        "radiance_path_intensity_start": 1.0,
        "radiance_path_intensity_end": 1.0,
        "radiance_path_anim_speed": 1.5,
        "radiance_easing": "smoothstep",
        # ---- descent ----
        "descent_node_alpha": 0.3,
        "descent_node_alpha_start": 1.0,
        "descent_node_alpha_end": 0.1,
        "descent_path_intensity": 0.1,
        "descent_path_intensity_start": 1.0,
        "descent_path_intensity_end": 0.0,
        "descent_path_anim_speed": 1.0,
        "descent_easing": "easeOutQuart",
        # ---- rendering ----
        "scale": 1.0,
        "center_x": 0.5,
        "center_y": 0.5,
        "node_size": 20.0,
        "node_glow_size": 25.0,
        "node_sides": 6,
        "path_thickness": 2.0,
        "path_size_scale": 1.0,
        "layer_opacity": 1.0,
        "node_color": "#FFFFFF",
        "path_color": "#FFFFFF",
        "glow_color": "#FFFF00",
        # ---- overlays (フックのみ) ----
        "enable_energy_pulses": True,
        "enable_mystic_symbols": True,
    }
)

# プリセット作成時のランダム選択候補（`resolve_random_choices` 用）
DEFAULT_EASING_CHOICES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "awakening_easing": ("easeInCubic", "easeInQuart", "easeInQuint", "easeInExpo"),
        "ascension_easing": (
            "easeInOutCubic",
            "easeInOutQuart",
            "easeInOutQuint",
            "easeInOutElastic",
        ),
        "radiance_easing": ("smoothstep", "easeOutCubic", "easeOutQuart", "linear"),
        "descent_easing": ("easeOutQuart", "easeOutQuint", "easeOutExpo", "easeInOutBack"),
    }
)


@dataclass(frozen=True, slots=True)
class PhaseCurve:
    """1 フェーズ・1 系列の曲線（start → end を easing で補間）。"""

    start: float
    end: float
    easing: str


# ---- キー正規化 / ランダム選択 --------------------------------------------


def normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """キーを正規化（camelCase → snake_case、旧名の置換）した新しい辞書を返す。"""
    out: dict[str, Any] = {}
    for k, v in options.items():
        key = normalize_key(k)
        out[_KEY_ALIASES.get(key, key)] = v
    return out


def _is_choice_key(key: str) -> bool:
    return key.endswith(_CHOICE_SUFFIXES)


def pick_random(value: Any, rng: np.random.Generator) -> Any:
    """配列なら 1 要素をランダムに選び、そうでなければそのまま返す。"""
    if isinstance(value, (list, tuple)):
        if not value:
            raise ConfigurationError("random choice list must not be empty")
        return value[int(rng.integers(len(value)))]
    return value


def resolve_random_choices(
    options: Mapping[str, Any], seed: int | None = None
) -> dict[str, Any]:
    """選択肢キー（`*_easing` / `*_blend_mode`）の配列値を 1 つに確定させた辞書を返す。

    プリセット作成時に 1 回だけ呼ぶ。以降のフレーム合成には乱数が入らない。
    `seed` を固定すれば結果は再現可能。
    """
    rng = np.random.default_rng(seed)
    out = normalize_options(options)
    # キー順に依存しないよう、ソート順で乱数を消費する
    for key in sorted(out):
        if _is_choice_key(key):
            out[key] = pick_random(out[key], rng)
    return out


def randomized_defaults(seed: int | None = None) -> dict[str, Any]:
    """既定値 + 既定のイージング候補からランダム確定させた設定を返す。"""
    merged = dict(DEFAULT_OPTIONS)
    merged.update({k: list(v) for k, v in DEFAULT_EASING_CHOICES.items()})
    return resolve_random_choices(merged, seed)


# ---- 検証ヘルパ ------------------------------------------------------------


def _as_float(options: Mapping[str, Any], key: str) -> float:
    value = options[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{key} must be a number, got {value!r}")
    f = float(value)
    if not math.isfinite(f):
        raise ConfigurationError(f"{key} must be finite, got {value!r}")
    return f


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _build_boundaries(options: Mapping[str, Any]) -> PhaseBoundaries:
    awakening = _as_float(options, "phase_awakening_start")
    ascension = _as_float(options, "phase_ascension_start")
    radiance = _as_float(options, "phase_radiance_start")
    descent = _as_float(options, "phase_descent_start")

    if awakening != 0.0:
        raise ConfigurationError(
            f"phase_awakening_start must be 0.0 (the cycle starts at progress 0), got {awakening}"
        )
    starts = (awakening, ascension, radiance, descent)
    for name, value in zip(("ascension", "radiance", "descent"), starts[1:]):
        if not (0.0 <= value < 1.0):
            raise ConfigurationError(f"phase_{name}_start must be in [0, 1), got {value}")
    if not (ascension <= radiance <= descent):
        raise ConfigurationError(
            "phase boundaries must be ordered: awakening <= ascension <= radiance <= descent, "
            f"got {starts}"
        )
    b = PhaseBoundaries(awakening, ascension, radiance, descent)
    for phase in PHASE_ORDER:
        if b.span(phase) == 0.0:
            logger.debug("phase %s has zero width; its local progress is always 0", phase.value)
    return b


def _validate_transition_width(width: float, boundaries: PhaseBoundaries) -> None:
    if width < 0.0:
        raise ConfigurationError(f"transition_zone_width must be >= 0, got {width}")
    if width == 0.0:
        return
    # ゾーン [b - w, b) は境界直前のフェーズに収まる必要がある（重なり/はみ出し禁止）
    for phase in PHASE_ORDER[:-1]:
        span = boundaries.span(phase)
        if span > 0.0 and width >= span:
            raise ConfigurationError(
                f"transition_zone_width={width} must be smaller than the {phase.value} "
                f"phase span ({span:g}); transition zones would overlap"
            )


def _validate_ranges(options: Mapping[str, Any]) -> None:
    for key, value in options.items():
        if not _is_number(value):
            continue
        if "alpha" in key or key == "layer_opacity":
            if not (0.0 <= float(value) <= 1.0):
                raise ConfigurationError(f"{key} must be between 0 and 1, got {value}")
        elif "glow" in key and float(value) < 0.0:
            raise ConfigurationError(f"{key} must be >= 0, got {value}")


def _resolve_easings(options: Mapping[str, Any]) -> dict[Phase, str]:
    out: dict[Phase, str] = {}
    for phase in PHASE_ORDER:
        key = f"{phase.value}_easing"
        raw = options.get(key)
        if isinstance(raw, (list, tuple)):
            raise ConfigurationError(
                f"{key} is a list of choices; call resolve_random_choices() before building "
                "the config"
            )
        if raw is not None and not isinstance(raw, str):
            raise ConfigurationError(f"{key} must be an easing name, got {raw!r}")
        if raw and not is_known_easing(raw):
            logger.debug("unknown easing %r for %s; using linear", raw, phase.value)
        out[phase] = canonical_name(raw)
    return out


def _discover_families(options: Mapping[str, Any]) -> tuple[str, ...]:
    found: list[str] = list(BUILTIN_FAMILIES)
    for key, value in options.items():
        m = _FAMILY_RE.match(key)
        if m is None:
            continue
        family = m.group("family")
        if family == "easing" or family in found:
            continue
        if not _is_number(value):
            # 数値でない `{phase}_*` キーは系列として扱わない（そのまま保持）
            continue
        found.append(family)
    return tuple(found)


def _family_value(options: Mapping[str, Any], phase: Phase, family: str) -> float:
    for key in (f"{phase.value}_{family}", family):
        v = options.get(key)
        if v is not None:
            return _as_float(options, key)
    return FAMILY_DEFAULT


def _build_curves(
    options: Mapping[str, Any], families: Sequence[str], easings: Mapping[Phase, str]
) -> dict[str, Mapping[Phase, PhaseCurve]]:
    curves: dict[str, Mapping[Phase, PhaseCurve]] = {}
    for family in families:
        per_phase: dict[Phase, PhaseCurve] = {}
        for phase in PHASE_ORDER:
            base = _family_value(options, phase, family)
            start_key = f"{phase.value}_{family}_start"
            end_key = f"{phase.value}_{family}_end"
            start = _as_float(options, start_key) if options.get(start_key) is not None else base
            end = _as_float(options, end_key) if options.get(end_key) is not None else base
            per_phase[phase] = PhaseCurve(start=start, end=end, easing=easings[phase])
        curves[family] = MappingProxyType(per_phase)
    return curves


# ---- 本体 ------------------------------------------------------------------


@dataclass(frozen=True)
class AnimationConfig:
    """エフェクト 1 インスタンスぶんの不変設定。

    `from_mapping()` で構築する。直接のフィールド指定は内部用途のみ。
    """

    boundaries: PhaseBoundaries
    transition_zone_width: float
    easings: Mapping[Phase, str]
    families: tuple[str, ...]
    curves: Mapping[str, Mapping[Phase, PhaseCurve]]
    options: Mapping[str, Any]

    @classmethod
    def from_mapping(
        cls,
        options: Mapping[str, Any] | None = None,
        *,
        base: Mapping[str, Any] | None = DEFAULT_OPTIONS,
        **overrides: Any,
    ) -> "AnimationConfig":
        """`base`（既定 `DEFAULT_OPTIONS`）に `options` と `overrides` を重ねて構築する。

        例外:
        - ConfigurationError: 境界/遷移幅/値域の違反、未確定のランダム選択。
        """
        merged: dict[str, Any] = normalize_options(base or {})
        merged.update(normalize_options(options or {}))
        merged.update(normalize_options(overrides))

        # 境界キーが欠けても既定で補う（base=None 用）
        for key, default in (
            ("phase_awakening_start", 0.0),
            ("phase_ascension_start", 0.20),
            ("phase_radiance_start", 0.60),
            ("phase_descent_start", 0.85),
            ("transition_zone_width", 0.05),
        ):
            if merged.get(key) is None:
                merged[key] = default

        boundaries = _build_boundaries(merged)
        width = _as_float(merged, "transition_zone_width")
        _validate_transition_width(width, boundaries)
        _validate_ranges(merged)
        easings = _resolve_easings(merged)
        families = _discover_families(merged)
        curves = _build_curves(merged, families, easings)

        return cls(
            boundaries=boundaries,
            transition_zone_width=width,
            easings=MappingProxyType(easings),
            families=families,
            curves=MappingProxyType(curves),
            options=MappingProxyType(merged),
        )

    # ---- 参照 ----
    def get(self, key: str, default: Any = None) -> Any:
        """静的オプションの参照（キーは正規化して探す）。"""
        k = normalize_key(key)
        value = self.options.get(_KEY_ALIASES.get(k, k))
        return default if value is None else value

    def get_float(self, key: str, default: float) -> float:
        value = self.get(key)
        if not _is_number(value):
            return float(default)
        return float(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key)
        return bool(default) if value is None else bool(value)

    def curve(self, family: str, phase: Phase) -> PhaseCurve:
        """系列 × フェーズの曲線。未登録の系列は既定値 1.0 の定数曲線。"""
        per_phase = self.curves.get(family)
        if per_phase is None:
            return PhaseCurve(FAMILY_DEFAULT, FAMILY_DEFAULT, self.easings[phase])
        return per_phase[phase]

    def easing_for(self, phase: Phase) -> str:
        return self.easings[phase]

    def replace(self, **overrides: Any) -> "AnimationConfig":
        """オプションを上書きした新しい設定を返す（自身は不変）。"""
        return AnimationConfig.from_mapping(self.options, base=None, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.options)


__all__ = [
    "AnimationConfig",
    "BUILTIN_FAMILIES",
    "ConfigurationError",
    "DEFAULT_EASING_CHOICES",
    "DEFAULT_OPTIONS",
    "FAMILY_DEFAULT",
    "PhaseCurve",
    "normalize_options",
    "pick_random",
    "randomized_defaults",
    "resolve_random_choices",
]
