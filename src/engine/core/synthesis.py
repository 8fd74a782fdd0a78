"""
どこで: `engine.core.synthesis`
何を: 進捗 p から 1 フレームぶんの描画パラメータ（node_alpha / path_intensity / path_anim_speed / 任意系列）を合成する。
なぜ: フェーズ別の独立した曲線を、境界で継ぎ目なく、フレーム間の状態を持たずに評価するため。

手順（系列ごと）:
1. PhaseModel で現在フェーズとフェーズ内進捗を得る。
2. フェーズのイージングで `lerp(start, end, local)`。
3. 遷移ゾーン内なら、次フェーズの開始値（局所進捗 0、次フェーズ自身のイージング）と
   `smoothstep(blend)` でブレンドする。ブレンドは設定に関わらず常に smoothstep
   （両端で微分 0 → 境界で速度が飛ばない）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .config import AnimationConfig
from .easing import SMOOTHSTEP, lerp
from .phases import Phase, classify
from .transition import TransitionInfo, detect


@dataclass(frozen=True)
class FrameParameters:
    """1 フレームぶんの解決済みパラメータ。

    - `values`: 合成された系列値（スカラー）。
    - `options`: 設定の静的オプション（系列以外はそのまま通過）。
    - `params["node_alpha"]` は合成値を優先し、無ければ静的オプションを返す。
    """

    progress: float
    phase: Phase
    phase_progress: float
    transition: TransitionInfo
    values: Mapping[str, float]
    options: Mapping[str, Any] = field(repr=False)

    def __getitem__(self, key: str) -> Any:
        if key in self.values:
            return self.values[key]
        return self.options[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values or key in self.options

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_dict())

    def get(self, key: str, default: Any = None) -> Any:
        try:
            value = self[key]
        except KeyError:
            return default
        return default if value is None else value

    @property
    def node_alpha(self) -> float:
        return float(self.values.get("node_alpha", 1.0))

    @property
    def path_intensity(self) -> float:
        return float(self.values.get("path_intensity", 1.0))

    @property
    def path_anim_speed(self) -> float:
        return float(self.values.get("path_anim_speed", 1.0))

    def as_dict(self) -> dict[str, Any]:
        """設定のコピーに合成値を上書きした辞書。"""
        out = dict(self.options)
        out.update(self.values)
        return out


def family_value(
    config: AnimationConfig, family: str, phase: Phase, local: float
) -> float:
    """系列 `family` のフェーズ `phase` 曲線を局所進捗 `local` で評価する。"""
    c = config.curve(family, phase)
    return lerp(c.start, c.end, local, c.easing)


def blend_family(
    config: AnimationConfig,
    family: str,
    phase: Phase,
    local: float,
    transition: TransitionInfo,
) -> float:
    value = family_value(config, family, phase, local)
    if transition.in_transition and transition.next_phase is not None:
        # 次フェーズが開始時に示す値（局所進捗 0）
        next_value = family_value(config, family, transition.next_phase, 0.0)
        value = lerp(value, next_value, transition.blend_amount, SMOOTHSTEP)
    return value


def synthesize(progress: float, config: AnimationConfig) -> FrameParameters:
    """進捗 `progress` における全系列の値を合成して返す（O(系列数)、純関数）。"""
    transition = detect(progress, config)
    phase, local = classify(progress, config)
    values = {
        family: blend_family(config, family, phase, local, transition)
        for family in config.families
    }
    return FrameParameters(
        progress=progress,
        phase=phase,
        phase_progress=local,
        transition=transition,
        values=MappingProxyType(values),
        options=config.options,
    )


__all__ = ["FrameParameters", "blend_family", "family_value", "synthesize"]
