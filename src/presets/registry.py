"""
どこで: `presets.registry`
何を: 名前付きプリセット（フラットなオプション辞書）の登録と取得。
なぜ: 作品ごとの調整値を名前で再利用し、`api.create_effect(..., preset="minimalist")` で引けるようにするため。

- キーは `normalize_key` で正規化（`KundaliniAwakening` == `kundalini_awakening`）。
- 取得時は毎回新しい dict を返す（呼び出し側での変更が登録値に波及しない）。
- 値にリスト/タプルを持つ `*_easing` は「候補」。`resolve_random_choices()` で確定させてから使う。
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from common.base_registry import BaseRegistry

_preset_registry = BaseRegistry()


def register_preset(name: str, options: Mapping[str, Any]) -> Mapping[str, Any]:
    """プリセットを登録し、読み取り専用ビューを返す。

    例外:
    - ValueError: 同名のプリセットが既に登録されている場合。
    """
    frozen = MappingProxyType(dict(options))
    _preset_registry.add(name, frozen)
    return frozen


def get_preset(name: str) -> dict[str, Any]:
    """登録済みプリセットのコピーを返す。

    例外:
        KeyError: 未登録の名前
    """
    return dict(_preset_registry.get(name))


def list_presets() -> list[str]:
    return sorted(_preset_registry.list_all())


def is_preset_registered(name: str) -> bool:
    return _preset_registry.is_registered(name)


def unregister_preset(name: str) -> None:
    _preset_registry.unregister(name)


__all__ = [
    "get_preset",
    "is_preset_registered",
    "list_presets",
    "register_preset",
    "unregister_preset",
]
