"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex → RGBA 0–255、アルファ乗算、Hex 間補間）を一元化。
なぜ: 図形定義・プリセット・ラスタ面で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color(s: str) -> tuple[int, int, int, int]:
    """Hex 文字列から RGBA(0–255) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    if not isinstance(s, str):
        raise ValueError(f"unsupported color type: {type(s)!r}")
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r, g, b, a)


def rgba8(color: str, alpha: float = 1.0) -> tuple[int, int, int, int]:
    """Hex 色にアルファ係数 `alpha`（0..1 に clamp）を乗じた RGBA(0–255) を返す。"""
    r, g, b, a = parse_hex_color(color)
    return (r, g, b, int(round(a * _clamp01(alpha))))


def to_hex(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{max(0, min(255, int(c))):02X}" for c in (r, g, b))


def lerp_color(from_hex: str, to_hex_: str, t: float) -> str:
    """2 色間を RGB 線形補間した Hex を返す（t は 0..1 に clamp）。"""
    u = _clamp01(t)
    r0, g0, b0, _ = parse_hex_color(from_hex)
    r1, g1, b1, _ = parse_hex_color(to_hex_)
    return to_hex(
        round(r0 + (r1 - r0) * u),
        round(g0 + (g1 - g0) * u),
        round(b0 + (b1 - b0) * u),
    )


__all__ = ["parse_hex_color", "rgba8", "to_hex", "lerp_color"]
