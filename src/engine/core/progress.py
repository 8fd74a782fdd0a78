"""
どこで: `engine.core.progress`
何を: (frame_index, total_frames) をループ安全な進捗 p∈[0,1] へ写す。
なぜ: 全フレームの状態をこの 1 値のみから導き、ループ継ぎ目を数学的に閉じるため。

要点:
- `total_frames - 1` で割る。frame 0 → 0.0、最終フレーム → 1.0 がちょうど得られる。
- 次の周回の frame 0 は再び 0.0 なので「進捗 1.0 の次」は描かれず、継ぎ目で同一フレームが
  重複したり跳んだりしない。
- 範囲外入力は clamp のみ（例外は投げない）。
"""

from __future__ import annotations

import numpy as np


def progress(frame_index: int, total_frames: int) -> float:
    """フレーム番号から進捗 [0,1] を返す。`total_frames <= 1` は常に 0.0。"""
    if total_frames <= 1:
        return 0.0
    p = frame_index / (total_frames - 1)
    # 浮動小数のはみ出し対策
    return max(0.0, min(1.0, float(p)))


def progress_array(total_frames: int) -> np.ndarray:
    """全フレームの進捗をまとめて返す（`progress` のベクトル版、float64）。"""
    n = int(total_frames)
    if n <= 0:
        return np.zeros(0, dtype=np.float64)
    if n == 1:
        return np.zeros(1, dtype=np.float64)
    out = np.arange(n, dtype=np.float64) / float(n - 1)
    return np.clip(out, 0.0, 1.0)


__all__ = ["progress", "progress_array"]
