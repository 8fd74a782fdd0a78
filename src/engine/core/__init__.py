"""
どこで: `engine.core` サブパッケージ。
何を: 進捗クロック・フェーズ分類・遷移ブレンド・イージング・フレームパラメータ合成・座標変換。
なぜ: (frame, total_frames, 設定) だけで 1 フレームの描画パラメータを決める純粋な計算層を、
      描画（`engine.render`）から分離して再利用可能にするため。
"""

from .config import AnimationConfig, ConfigurationError, DEFAULT_OPTIONS
from .coords import to_pixels, to_pixels_array
from .easing import ease, lerp, list_easings
from .phases import PHASE_ORDER, Phase, PhaseBoundaries, classify
from .progress import progress, progress_array
from .synthesis import FrameParameters, synthesize
from .transition import TransitionInfo, detect

__all__ = [
    "AnimationConfig",
    "ConfigurationError",
    "DEFAULT_OPTIONS",
    "FrameParameters",
    "PHASE_ORDER",
    "Phase",
    "PhaseBoundaries",
    "TransitionInfo",
    "classify",
    "detect",
    "ease",
    "lerp",
    "list_easings",
    "progress",
    "progress_array",
    "synthesize",
    "to_pixels",
    "to_pixels_array",
]
