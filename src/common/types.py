"""
どこで: `common` の型定義。
何を: 点/色/辺などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

Vec2 = tuple[float, float]
# 出力面のピクセル座標 (px, py)
Point = tuple[float, float]
# "#RRGGBB" / "#RRGGBBAA"
HexColor = str
# ノードインデックスの順序対（描画上は無向）
PathConnection = tuple[int, int]


__all__ = ["Vec2", "Point", "HexColor", "PathConnection"]
