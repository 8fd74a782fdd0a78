"""
どこで: `shapes` のレジストリ層（関数専用）。
何を: `@figure` デコレータで図形ファクトリ関数を登録し、取得/一覧/検査を提供。
なぜ: 図形の追加を一貫 API で管理し、`api.create_effect("tree_of_life")` のように名前で解決するため。

概要:
- 登録対象は「関数」のみ（`GeometryProvider` を返す）。
- デコレータは名前省略可（`@figure` / `@figure()`）と明示名指定をサポート。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from common.base_registry import BaseRegistry

from .base import GeometryProvider

FigureFn = Callable[..., GeometryProvider]

_figure_registry = BaseRegistry()


def figure(arg: Any | None = None, /, name: str | None = None):
    """図形ファクトリ関数をレジストリに登録するデコレータ。

    使用例:
    - `@figure` / `@figure()`                        → 関数名から自動推論。
    - `@figure("custom")` / `@figure(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@figure は関数のみ登録可能です: got {obj!r}")
        return _figure_registry.register(resolved_name)(obj)

    # 直付け (@figure)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # クラス等を直付けした場合はデコレータを返さず即座に拒否
    if arg is not None and not isinstance(arg, str):
        raise TypeError(f"@figure は関数のみ登録可能です: got {arg!r}")

    # 位置引数で名前を渡した (@figure("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_figure(name: str) -> FigureFn:
    """登録された図形ファクトリを取得。

    例外:
        KeyError: 図形が登録されていない場合
    """
    return _figure_registry.get(name)


def build_figure(name: str, **params: Any) -> GeometryProvider:
    """名前から図形を生成して返す。"""
    return get_figure(name)(**params)


def list_figures() -> list[str]:
    """登録されている図形名をソートして返す。"""
    return sorted(_figure_registry.list_all())


def is_figure_registered(name: str) -> bool:
    return _figure_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _figure_registry.unregister(name)


__all__ = [
    "figure",
    "build_figure",
    "get_figure",
    "list_figures",
    "is_figure_registered",
    "unregister",
]
