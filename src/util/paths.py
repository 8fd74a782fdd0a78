"""
どこで: `util.paths`。
何を: フレーム書き出し先ディレクトリの生成と解決ユーティリティを提供する。
なぜ: ランタイムから簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from common import settings

from .utils import _find_project_root


def ensure_render_dir(path: str | Path | None = None) -> Path:
    """フレーム出力先を作成して返す。

    - `path` 省略時はプロジェクトルート直下の `PPH_OUTPUT_DIR`（既定 `renders/`）。
    - 相対パスはカレントディレクトリ基準。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    if path is None:
        root = _find_project_root(Path(__file__).parent)
        out = root / settings.get().OUTPUT_DIR
    else:
        out = Path(path)
    out.mkdir(parents=True, exist_ok=True)
    return out


def frame_filename(frame_index: int, total_frames: int) -> str:
    """`frame_0007.png` 形式（桁数は total_frames に合わせ最低 4 桁）。"""
    width = max(4, len(str(max(0, total_frames - 1))))
    return f"frame_{frame_index:0{width}d}.png"
