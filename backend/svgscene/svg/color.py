"""Color parsing and the paint normalizer used for non-numeric animation values."""

from __future__ import annotations

import colorsys
import re
from typing import Any

from svgscene.svg.constants import RE_NUM

RGBA = tuple[int, int, int, float]

_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_RGB_RE = re.compile(
    rf"^rgba?\(\s*({RE_NUM})(%?)\s*[\s,]\s*({RE_NUM})(%?)\s*[\s,]\s*({RE_NUM})(%?)"
    rf"\s*(?:[\s,/]\s*({RE_NUM})(%?)\s*)?\)$",
    re.IGNORECASE,
)
_HSL_RE = re.compile(
    rf"^hsla?\(\s*({RE_NUM})(?:deg)?\s*[\s,]\s*({RE_NUM})%\s*[\s,]\s*({RE_NUM})%"
    rf"\s*(?:[\s,/]\s*({RE_NUM})(%?)\s*)?\)$",
    re.IGNORECASE,
)

NAMED_COLORS: dict[str, str] = {
    "aliceblue": "#f0f8ff",
    "antiquewhite": "#faebd7",
    "aqua": "#00ffff",
    "aquamarine": "#7fffd4",
    "azure": "#f0ffff",
    "beige": "#f5f5dc",
    "bisque": "#ffe4c4",
    "black": "#000000",
    "blanchedalmond": "#ffebcd",
    "blue": "#0000ff",
    "blueviolet": "#8a2be2",
    "brown": "#a52a2a",
    "burlywood": "#deb887",
    "cadetblue": "#5f9ea0",
    "chartreuse": "#7fff00",
    "chocolate": "#d2691e",
    "coral": "#ff7f50",
    "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc",
    "crimson": "#dc143c",
    "cyan": "#00ffff",
    "darkblue": "#00008b",
    "darkcyan": "#008b8b",
    "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9",
    "darkgreen": "#006400",
    "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00",
    "darkorchid": "#9932cc",
    "darkred": "#8b0000",
    "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f",
    "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3",
    "deeppink": "#ff1493",
    "deepskyblue": "#00bfff",
    "dimgray": "#696969",
    "dimgrey": "#696969",
    "dodgerblue": "#1e90ff",
    "firebrick": "#b22222",
    "floralwhite": "#fffaf0",
    "forestgreen": "#228b22",
    "fuchsia": "#ff00ff",
    "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "gray": "#808080",
    "green": "#008000",
    "greenyellow": "#adff2f",
    "grey": "#808080",
    "honeydew": "#f0fff0",
    "hotpink": "#ff69b4",
    "indianred": "#cd5c5c",
    "indigo": "#4b0082",
    "ivory": "#fffff0",
    "khaki": "#f0e68c",
    "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd",
    "lightblue": "#add8e6",
    "lightcoral": "#f08080",
    "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90",
    "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a",
    "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa",
    "lightslategray": "#778899",
    "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0",
    "lime": "#00ff00",
    "limegreen": "#32cd32",
    "linen": "#faf0e6",
    "magenta": "#ff00ff",
    "maroon": "#800000",
    "mediumaquamarine": "#66cdaa",
    "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db",
    "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585",
    "midnightblue": "#191970",
    "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead",
    "navy": "#000080",
    "oldlace": "#fdf5e6",
    "olive": "#808000",
    "olivedrab": "#6b8e23",
    "orange": "#ffa500",
    "orangered": "#ff4500",
    "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa",
    "palegreen": "#98fb98",
    "paleturquoise": "#afeeee",
    "palevioletred": "#db7093",
    "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9",
    "peru": "#cd853f",
    "pink": "#ffc0cb",
    "plum": "#dda0dd",
    "powderblue": "#b0e0e6",
    "purple": "#800080",
    "rebeccapurple": "#663399",
    "red": "#ff0000",
    "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1",
    "saddlebrown": "#8b4513",
    "salmon": "#fa8072",
    "sandybrown": "#f4a460",
    "seagreen": "#2e8b57",
    "seashell": "#fff5ee",
    "sienna": "#a0522d",
    "silver": "#c0c0c0",
    "skyblue": "#87ceeb",
    "slateblue": "#6a5acd",
    "slategray": "#708090",
    "slategrey": "#708090",
    "snow": "#fffafa",
    "springgreen": "#00ff7f",
    "steelblue": "#4682b4",
    "tan": "#d2b48c",
    "teal": "#008080",
    "thistle": "#d8bfd8",
    "tomato": "#ff6347",
    "turquoise": "#40e0d0",
    "violet": "#ee82ee",
    "wheat": "#f5deb3",
    "white": "#ffffff",
    "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
}


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _channel(raw: str, percent: str) -> int:
    value = float(raw)
    if percent:
        value = value * 255.0 / 100.0
    return int(round(_clamp(value, 0.0, 255.0)))


def _alpha(raw: str | None, percent: str | None) -> float:
    if raw is None:
        return 1.0
    value = float(raw)
    if percent:
        value /= 100.0
    return _clamp(value, 0.0, 1.0)


class Color:
    """An RGBA color. Unparseable input becomes opaque black, flagged unrecognised."""

    def __init__(self, color: str | RGBA | Color | None = None) -> None:
        self.is_unrecognised = False
        if isinstance(color, Color):
            self._source: RGBA = color.get_source()
        elif isinstance(color, tuple):
            r, g, b, *rest = color
            self._source = (int(r), int(g), int(b), float(rest[0]) if rest else 1.0)
        elif color is None:
            self._source = (0, 0, 0, 1.0)
        else:
            parsed = self._parse(color)
            if parsed is None:
                self.is_unrecognised = True
                parsed = (0, 0, 0, 1.0)
            self._source = parsed

    @staticmethod
    def _parse(color: str) -> RGBA | None:
        text = color.strip().lower()
        if text == "transparent":
            return (255, 255, 255, 0.0)
        text = NAMED_COLORS.get(text, text)

        match = _HEX_RE.match(text)
        if match:
            digits = match.group(1)
            if len(digits) in (3, 4):
                digits = "".join(ch * 2 for ch in digits)
            r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
            a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
            return (r, g, b, round(a, 2))

        match = _RGB_RE.match(text)
        if match:
            r, rp, g, gp, b, bp, a, ap = match.groups()
            return (_channel(r, rp), _channel(g, gp), _channel(b, bp), _alpha(a, ap))

        match = _HSL_RE.match(text)
        if match:
            h, s, lightness, a, ap = match.groups()
            hue = (float(h) % 360.0) / 360.0
            sat = _clamp(float(s) / 100.0, 0.0, 1.0)
            light = _clamp(float(lightness) / 100.0, 0.0, 1.0)
            r, g, b = colorsys.hls_to_rgb(hue, light, sat)
            return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), _alpha(a, ap))

        return None

    def get_source(self) -> RGBA:
        return self._source

    def get_alpha(self) -> float:
        return self._source[3]

    def set_alpha(self, alpha: float) -> Color:
        r, g, b, _ = self._source
        self._source = (r, g, b, _clamp(float(alpha), 0.0, 1.0))
        return self

    def to_rgb(self) -> str:
        r, g, b, _ = self._source
        return f"rgb({r},{g},{b})"

    def to_rgba(self) -> str:
        r, g, b, a = self._source
        return f"rgba({r},{g},{b},{a:g})"

    def to_hex(self) -> str:
        r, g, b, _ = self._source
        return f"{r:02X}{g:02X}{b:02X}"

    def __repr__(self) -> str:
        return f"Color({self.to_rgba()!r})"


_PAINT_OPACITY = {"stroke": "stroke_opacity", "fill": "fill_opacity"}


def set_stroke_fill_opacity(attributes: dict[str, Any]) -> dict[str, Any]:
    """Normalize paint values to ``rgba(...)`` strings.

    ``fill_opacity`` / ``stroke_opacity`` are folded into the color alpha and
    removed. ``none``, non-string paints and unrecognised colors pass through.
    """
    for attr, opacity_attr in _PAINT_OPACITY.items():
        value = attributes.get(attr)
        if not isinstance(value, str) or value == "none":
            continue
        color = Color(value)
        if color.is_unrecognised:
            continue
        opacity = attributes.pop(opacity_attr, None)
        if opacity is not None:
            color.set_alpha(round(color.get_alpha() * float(opacity), 2))
        attributes[attr] = color.to_rgba()
    return attributes
