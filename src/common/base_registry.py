"""
どこで: `common.base_registry`
何を: 名前→オブジェクトの登録簿。キーは正規化（キャメル→スネーク、ハイフン→アンダースコア）。
なぜ: イージング/図形/プリセットの 3 つの登録簿を同一ポリシーで運用するため。
"""

from __future__ import annotations

import re
from typing import Any, Callable


def camel_to_snake(name: str) -> str:
    """`easeInOutCubic` -> `ease_in_out_cubic`。"""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return s2.lower()


def normalize_key(name: str) -> str:
    """レジストリ/設定キーの正規化（例: "HermeticAscent" -> "hermetic_ascent"）。"""
    if not isinstance(name, str):
        raise TypeError("レジストリキーは str である必要があります")
    if not name:
        raise ValueError("レジストリキーは空であってはなりません")
    name = name.replace("-", "_")
    # 大文字を含む場合のみキャメル→スネーク変換
    return camel_to_snake(name) if any(c.isupper() for c in name) else name.lower()


class BaseRegistry:
    """レジストリの基底クラス。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネークを吸収）。
    - デコレータは名前省略可。省略時はクラス/関数名から自動推論します。
    """

    def __init__(self) -> None:
        # 登録対象の型は統一せず Any とする（関数/マッピングの双方を許容）。
        self._registry: dict[str, Any] = {}

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """オブジェクトをレジストリに登録するデコレータ。"""

        def decorator(obj: Any) -> Any:
            key = normalize_key(name) if name else normalize_key(obj.__name__)
            if key in self._registry and self._registry[key] is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            return obj

        return decorator

    def add(self, name: str, obj: Any) -> None:
        """デコレータを介さずに登録する（データ値の登録用）。"""
        self.register(name)(obj)

    def get(self, name: str) -> Any:
        """登録されたオブジェクトを取得。"""
        key = normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録されているすべての名前を取得（未ソート）。"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        """指定された名前が登録されているかチェック"""
        return normalize_key(name) in self._registry

    def unregister(self, name: str) -> None:
        """レジストリから削除（名前が存在しない場合は無視）。"""
        key = normalize_key(name)
        if key in self._registry:
            del self._registry[key]

    def clear(self) -> None:
        """レジストリをクリア"""
        self._registry.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """レジストリの読み取り専用アクセス"""
        return self._registry.copy()


__all__ = ["BaseRegistry", "camel_to_snake", "normalize_key"]
