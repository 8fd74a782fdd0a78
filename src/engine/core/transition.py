"""
どこで: `engine.core.transition`
何を: 進捗が内部境界直前の遷移ゾーン [b - w, b) に入っているかを判定し、ブレンド量と隣接フェーズ対を返す。
なぜ: フェーズ曲線を境界で不連続に切り替えず、次フェーズの開始値へ滑らかに寄せるため。

規約:
- ゾーンは Ascension/Radiance/Descent 各開始点の直前のみ（Awakening の前、Descent の後には無い）。
- 先頭から走査し最初に一致したゾーンを採用。重なりは構築時検証（`AnimationConfig`）で排除済み。
- 境界が一致する（幅 0 のフェーズがある）場合、遷移先は境界上で実際に始まるフェーズ。
- w <= 0 の場合は遷移なし。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .phases import Phase, phase_at

if TYPE_CHECKING:
    from .config import AnimationConfig

# blend_amount は [0, 1) に収める
_BLEND_MAX = math.nextafter(1.0, 0.0)


@dataclass(frozen=True, slots=True)
class TransitionInfo:
    """1 フレームぶんの遷移判定結果（永続化しない）。"""

    in_transition: bool
    blend_amount: float
    current_phase: Phase
    next_phase: Phase | None = None


def _in_zone(remaining: float, width: float) -> bool:
    # b - w は丸めで僅かにずれるため、ゾーン開始は許容誤差付きで含める
    return remaining > 0.0 and (remaining <= width or math.isclose(remaining, width))


def detect(progress: float, config: "AnimationConfig") -> TransitionInfo:
    """`progress` の遷移状態を返す。ゾーン外なら `in_transition=False`。

    `next_phase` は境界上で実際に始まるフェーズ。幅 0 のフェーズを挟む場合は
    それを飛ばした先になる（ゾーン終端の値が境界での値と一致する）。
    """
    width = config.transition_zone_width
    b = config.boundaries
    if width > 0.0:
        for boundary in b.internal():
            remaining = boundary - progress
            if _in_zone(remaining, width):
                blend = min(max(1.0 - remaining / width, 0.0), _BLEND_MAX)
                return TransitionInfo(
                    in_transition=True,
                    blend_amount=blend,
                    current_phase=phase_at(progress, b),
                    next_phase=phase_at(boundary, b),
                )
    return TransitionInfo(
        in_transition=False,
        blend_amount=0.0,
        current_phase=phase_at(progress, b),
        next_phase=None,
    )


__all__ = ["TransitionInfo", "detect"]
