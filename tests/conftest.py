"""共通フィクスチャ。

- 既定設定の `AnimationConfig`
- 描画呼び出しを記録する描画面（`tests._utils.recording`）
"""

from __future__ import annotations

import pytest

from engine.core.config import AnimationConfig
from tests._utils.recording import RecordingCanvasFactory


@pytest.fixture()
def default_config() -> AnimationConfig:
    return AnimationConfig.from_mapping()


@pytest.fixture()
def recording_factory() -> RecordingCanvasFactory:
    return RecordingCanvasFactory()
