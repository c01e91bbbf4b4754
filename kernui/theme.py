"""Colour palette, fonts, sizes and widget styles of the minimalist theme."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

OPA_TRANSP = 0
OPA_10 = 25
OPA_30 = 76
OPA_50 = 127
OPA_90 = 229
OPA_COVER = 255

Style = dict


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: Union[int, str]) -> "Color":
        """Build a colour from 0xRRGGBB or a "#RRGGBB" string."""
        if isinstance(value, str):
            text = value[1:] if value.startswith("#") else value
            if len(text) != 6:
                raise ValueError(f"invalid colour: {value!r}")
            try:
                value = int(text, 16)
            except ValueError:
                raise ValueError(f"invalid colour: {value!r}") from None
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"colour out of range: {value}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_hex(self) -> str:
        """The colour as a lower-case "#rrggbb" string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Theme:
    """The UI theme: colours, font sizes, dimensions and derived styles."""

    bg: Color = Color.from_hex(0x000000)
    panel: Color = Color.from_hex(0x1A1A1A)
    main: Color = Color.from_hex(0xFFFFFF)
    secondary: Color = Color.from_hex(0x888888)
    highlight: Color = Color.from_hex(0xFF6600)
    disabled: Color = Color.from_hex(0x333333)
    error: Color = Color.from_hex(0xFF0000)
    yes: Color = Color.from_hex(0x00FF00)
    no: Color = Color.from_hex(0xFF0000)

    font_small: int = 24
    font_medium: int = 36

    button_width: int = 150
    button_height: int = 50
    button_spacing: int = 20
    default_padding: int = 30

    screen: Style = field(init=False, compare=False)
    frame: Style = field(init=False, compare=False)
    solid_rectangle: Style = field(init=False, compare=False)
    label: Style = field(init=False, compare=False)
    button_label: Style = field(init=False, compare=False)
    transparent_container: Style = field(init=False, compare=False)
    separator: Style = field(init=False, compare=False)

    def __post_init__(self) -> None:
        styles = {
            "screen": {
                "bg_color": self.bg,
                "bg_opa": OPA_COVER,
                "text_color": self.main,
                "text_font": self.font_small,
                "border_width": 0,
                "outline_width": 0,
            },
            "frame": {
                "bg_color": self.panel,
                "bg_opa": OPA_90,
                "border_color": self.main,
                "border_width": 2,
                "radius": 6,
            },
            "solid_rectangle": {
                "bg_color": self.panel,
                "bg_opa": OPA_COVER,
                "radius": 2,
                "border_width": 0,
                "outline_width": 0,
                "pad_all": 0,
                "shadow_width": 0,
            },
            "label": {
                "text_color": self.secondary,
                "text_font": self.font_small,
                "bg_opa": OPA_TRANSP,
                "border_width": 0,
            },
            "button_label": {
                "text_color": self.main,
                "text_font": self.font_medium,
                "bg_opa": OPA_TRANSP,
                "border_width": 0,
            },
            "transparent_container": {
                "bg_opa": OPA_TRANSP,
                "border_width": 0,
                "pad_all": 0,
            },
            "separator": {
                "bg_color": self.main,
                "bg_opa": OPA_50,
                "border_width": 0,
                "radius": 0,
            },
        }
        for name, style in styles.items():
            object.__setattr__(self, name, style)

    def button_style(self, state: str = "default") -> Style:
        """Touch-button style for "default", "pressed" or "disabled"."""
        style: Style = {
            "bg_color": self.bg,
            "bg_opa": OPA_30,
            "text_color": self.main,
            "border_width": 0,
            "radius": 12,
            "pad_all": 15,
            "shadow_width": 0,
        }
        if state == "pressed":
            style.update(bg_color=self.highlight, bg_opa=OPA_50)
        elif state == "disabled":
            style.update(text_color=self.disabled, bg_opa=OPA_10)
        elif state != "default":
            raise ValueError(f"unknown button state: {state!r}")
        return style