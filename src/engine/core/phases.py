"""
どこで: `engine.core.phases`
何を: 4 フェーズ（Awakening → Ascension → Radiance → Descent）の境界表と、進捗の分類。
なぜ: 進捗 p を「現在フェーズ」と「フェーズ内進捗」に分解し、曲線評価/ブレンド判定で共有するため。

規約:
- 各フェーズは半開区間 [start, next_start)。Descent のみ [start, 1.0] を担う（1.0 を含む）。
- 幅 0 の区間（境界が一致）ではフェーズ内進捗を 0 と定義する（例外にしない）。
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # 循環回避（config → phases）
    from .config import AnimationConfig


class Phase(enum.Enum):
    """アニメーション周期の 4 区分。値は設定キーの接頭辞に一致する。"""

    AWAKENING = "awakening"
    ASCENSION = "ascension"
    RADIANCE = "radiance"
    DESCENT = "descent"

    @property
    def index(self) -> int:
        return PHASE_ORDER.index(self)

    @property
    def next(self) -> "Phase | None":
        i = self.index
        return PHASE_ORDER[i + 1] if i + 1 < len(PHASE_ORDER) else None

    @property
    def label(self) -> str:
        return self.value.capitalize()


PHASE_ORDER: tuple[Phase, ...] = (
    Phase.AWAKENING,
    Phase.ASCENSION,
    Phase.RADIANCE,
    Phase.DESCENT,
)


@dataclass(frozen=True, slots=True)
class PhaseBoundaries:
    """各フェーズの開始位置（進捗比）。awakening は常に 0.0。"""

    awakening: float = 0.0
    ascension: float = 0.20
    radiance: float = 0.60
    descent: float = 0.85

    def starts(self) -> tuple[float, float, float, float]:
        return (self.awakening, self.ascension, self.radiance, self.descent)

    def internal(self) -> tuple[float, float, float]:
        """内部境界（Ascension/Radiance/Descent の開始）。遷移ゾーンの基準点。"""
        return (self.ascension, self.radiance, self.descent)

    def intervals(self) -> dict[Phase, tuple[float, float]]:
        """フェーズ → [start, end) の表。"""
        s = self.starts()
        ends = s[1:] + (1.0,)
        return {ph: (s[i], ends[i]) for i, ph in enumerate(PHASE_ORDER)}

    def interval(self, phase: Phase) -> tuple[float, float]:
        return self.intervals()[phase]

    def span(self, phase: Phase) -> float:
        a, b = self.interval(phase)
        return b - a


def phase_at(progress: float, boundaries: PhaseBoundaries) -> Phase:
    """進捗が属するフェーズ（上限が p を超える最初の区間、既定は Descent）。"""
    if progress < boundaries.ascension:
        return Phase.AWAKENING
    if progress < boundaries.radiance:
        return Phase.ASCENSION
    if progress < boundaries.descent:
        return Phase.RADIANCE
    return Phase.DESCENT


def local_progress(progress: float, phase: Phase, boundaries: PhaseBoundaries) -> float:
    """フェーズ内進捗 `(p - start) / (end - start)`。幅 0 の区間は 0.0。"""
    start, end = boundaries.interval(phase)
    if start == end:
        return 0.0
    return (progress - start) / (end - start)


def classify(progress: float, config: "AnimationConfig") -> tuple[Phase, float]:
    """進捗を (フェーズ, フェーズ内進捗) に分類する。"""
    b = config.boundaries
    phase = phase_at(progress, b)
    return phase, local_progress(progress, phase, b)


def phase_progress(progress: float, phase: Phase, config: "AnimationConfig") -> float:
    return local_progress(progress, phase, config.boundaries)


__all__ = [
    "Phase",
    "PHASE_ORDER",
    "PhaseBoundaries",
    "classify",
    "local_progress",
    "phase_at",
    "phase_progress",
]
