"""
どこで: `common.settings`
何を: プロジェクトの環境変数（`PPH_*`）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # 出力キャンバス（合成先レイヤがサイズを持たない場合の既定）
    CANVAS_WIDTH: int = 1024
    CANVAS_HEIGHT: int = 1024

    # 書き出し
    OUTPUT_DIR: str = "renders"

    # Logging / debug
    LOG_LEVEL: str = "INFO"
    DEBUG_TRANSITIONS: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 解像度は 1 未満を 1 に丸める。
    """
    _settings.CANVAS_WIDTH = env_int("PPH_CANVAS_WIDTH", 1024, min_value=1) or 1024
    _settings.CANVAS_HEIGHT = env_int("PPH_CANVAS_HEIGHT", 1024, min_value=1) or 1024
    _settings.OUTPUT_DIR = env_str("PPH_OUTPUT_DIR", "renders")
    _settings.LOG_LEVEL = env_str("PPH_LOG_LEVEL", "INFO").upper()
    _settings.DEBUG_TRANSITIONS = env_bool("PPH_DEBUG_TRANSITIONS", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
