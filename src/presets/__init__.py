"""
どこで: `presets` パッケージ。
何を: 名前付きプリセット（フラットなオプション辞書）。import 時に組込みプリセットを登録する。
なぜ: 調整済みのタイミング/色/強度の組み合わせを名前で再利用するため。
"""

from . import chakra_mandala, tree_of_life  # noqa: F401  (登録副作用)
from .registry import (
    get_preset,
    is_preset_registered,
    list_presets,
    register_preset,
    unregister_preset,
)

__all__ = [
    "get_preset",
    "is_preset_registered",
    "list_presets",
    "register_preset",
    "unregister_preset",
]
