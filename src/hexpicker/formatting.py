"""Copyable text rows for the selected color.

Each row has a `shown` form, padded so the rows line up in a monospace
column, and a `copied` form without padding that goes to the clipboard.

CSS rows (`OutputFormat.CSS`):

    shown   hsl(306  , 41% , 66% )     copied  hsl(305.9, 41%, 66.1%)
    shown   rgb(204  , 133 , 197 )     copied  rgb(204, 133, 197)

Literal rows (`OutputFormat.LITERAL`):

    shown   hsl(305.9, 0.41, 0.66)     copied  hsl(305.9, 0.41, 0.66)
    shown   hex("#cc85c5")             copied  hex("#cc85c5")
"""

from dataclasses import dataclass

from hexpicker.models import Color, OutputFormat
from hexpicker.utils.rounding import format_float, format_number, round_half_away


@dataclass(frozen=True)
class CopyableLine:
    """One row of output text."""

    label: str
    shown: str
    copied: str


def _percent(x: float) -> str:
    return f"{x * 100.0:.0f}%"


def _css_cylindrical(label: str, h: float, a: float, b: float) -> CopyableLine:
    shown = f"{label}({h:<5.0f}, {_percent(a):<4}, {_percent(b):<4})"
    copied = (
        f"{label}({format_number(round_half_away(h, 1))}, "
        f"{format_number(round_half_away(a * 100.0, 1))}%, "
        f"{format_number(round_half_away(b * 100.0, 1))}%)"
    )
    return CopyableLine(label=label, shown=shown, copied=copied)


def _literal_triple(label: str, x: float, y: float, z: float, first_decimals: int) -> CopyableLine:
    fields = (
        format_float(round_half_away(x, first_decimals)),
        format_float(round_half_away(y, 2)),
        format_float(round_half_away(z, 2)),
    )
    shown = f"{label}({fields[0]:<5}, {fields[1]:<4}, {fields[2]:<4})"
    copied = f"{label}({', '.join(fields)})"
    return CopyableLine(label=label, shown=shown, copied=copied)


def css_lines(color: Color) -> list[CopyableLine]:
    """hsl / hsv / rgb / hex rows in CSS syntax."""
    r, g, b = color.to_rgb8()
    hex_text = color.to_hex()
    return [
        _css_cylindrical("hsl", *color.to_hsl()),
        _css_cylindrical("hsv", *color.to_hsv()),
        CopyableLine(
            label="rgb",
            shown=f"rgb({r:<5}, {g:<4}, {b:<4})",
            copied=f"rgb({r}, {g}, {b})",
        ),
        CopyableLine(label="hex", shown=hex_text, copied=hex_text),
    ]


def literal_lines(color: Color) -> list[CopyableLine]:
    """hsl / hsv / rgb / hex rows as constructor literals with rounded floats."""
    literal_hex = f'hex("{color.to_hex()}")'
    return [
        _literal_triple("hsl", *color.to_hsl(), first_decimals=1),
        _literal_triple("hsv", *color.to_hsv(), first_decimals=1),
        _literal_triple("rgb", color.r, color.g, color.b, first_decimals=2),
        CopyableLine(label="hex", shown=literal_hex, copied=literal_hex),
    ]


def output_lines(color: Color, output: OutputFormat) -> list[CopyableLine]:
    """Rows for `color` in the requested format."""
    if OutputFormat(output) is OutputFormat.LITERAL:
        return literal_lines(color)
    return css_lines(color)
