"""Colour themes stored as INI files."""

from __future__ import annotations

import os
import re
from typing import NamedTuple

from vitaftp.inifile import IniFile, load

__all__ = [
    "Rgba",
    "parse_color",
    "load_style",
    "resolve_style_path",
    "STYLE_KEYS",
    "CONFIG_STYLE",
    "DEFAULT_COLOR",
    "DEFAULT_STYLE_NAME",
    "DEFAULT_STYLE_PATH",
    "STYLES_FOLDER",
]

DEFAULT_STYLE_PATH = "ux0:app/SMLA00001/default_style.ini"
STYLES_FOLDER = "ux0:data/SMLA00001/styles"
DEFAULT_STYLE_NAME = "Default"

CONFIG_STYLE = "Style"
DEFAULT_COLOR = "1.00,1.00,1.00,1.00"

# Colour slot name and the key it is read from in the [Style] section.
STYLE_KEYS = (
    ("Text", "Text"),
    ("TextDisabled", "TextDisabled"),
    ("WindowBg", "WindowBackgroud"),
    ("ChildBg", "ChildBackground"),
    ("PopupBg", "PopupBackground"),
    ("Border", "Border"),
    ("BorderShadow", "BorderShadhow"),
    ("FrameBg", "FrameBackground"),
    ("FrameBgHovered", "FrameBackgroundHovered"),
    ("FrameBgActive", "FrameBackgroundActive"),
    ("TitleBg", "TitleBackground"),
    ("TitleBgActive", "TitleBackgroundActive"),
    ("TitleBgCollapsed", "TitleBackgroundCollapsed"),
    ("MenuBarBg", "MenuBarBackground"),
    ("ScrollbarBg", "ScrollbarBackground"),
    ("ScrollbarGrab", "ScrollbarGrab"),
    ("ScrollbarGrabHovered", "ScrollbarGrabHovered"),
    ("ScrollbarGrabActive", "ScrollbarGrabActive"),
    ("CheckMark", "CheckMark"),
    ("SliderGrab", "SliderGrab"),
    ("SliderGrabActive", "SliderGrabActive"),
    ("Button", "Button"),
    ("ButtonHovered", "ButtonHovered"),
    ("ButtonActive", "ButtonActive"),
    ("Header", "Header"),
    ("HeaderHovered", "HeaderHovered"),
    ("HeaderActive", "HeaderActive"),
    ("Separator", "Separator"),
    ("SeparatorHovered", "SeparatorHovered"),
    ("SeparatorActive", "SeparatorActive"),
    ("ResizeGrip", "ResizeGrip"),
    ("ResizeGripHovered", "ResizeHovered"),
    ("ResizeGripActive", "ResizeGripActive"),
    ("Tab", "Tab"),
    ("TabHovered", "TabHovered"),
    ("TabActive", "TabActive"),
    ("TabUnfocused", "TabUnfocused"),
    ("TabUnfocusedActive", "TabUnfocusedActive"),
    ("TextSelectedBg", "TextSelectedBackground"),
    ("NavHighlight", "NavigationHighlight"),
    ("NavWindowingHighlight", "NavigationWindowingHighlight"),
    ("NavWindowingDimBg", "NavigationWindowingDimBackground"),
    ("ModalWindowDimBg", "ModalWindowDimBackground"),
)

_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class Rgba(NamedTuple):
    """A colour with red, green, blue and alpha in the range 0..1."""

    r: float
    g: float
    b: float
    a: float


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _components(text: str):
    code = ""
    last = len(text) - 1
    for index, char in enumerate(text):
        if char not in " \t,":
            code += char
        if char == "," or index == last:
            yield _atof(code)
            code = ""


def parse_color(text):
    """Parse ``"r,g,b,a"`` into an :class:`Rgba`.

    Blanks are ignored, a part that is not a number counts as 0 and parts
    beyond the fourth are ignored. Fewer than four parts raise ValueError.
    """
    parts = list(_components(text))
    if len(parts) < 4:
        raise ValueError(f"colour needs four components: {text!r}")
    return Rgba(*parts[:4])


def load_style(path):
    """Read a style file and return its colours keyed by slot name.

    Colours missing from the file, or every colour when the file cannot be
    read, are opaque white.
    """
    try:
        ini = load(path)
    except OSError:
        ini = IniFile()
    return {
        slot: parse_color(ini.read_string(CONFIG_STYLE, key, DEFAULT_COLOR))
        for slot, key in STYLE_KEYS
    }


def resolve_style_path(style_name, styles_folder=STYLES_FOLDER, default_path=DEFAULT_STYLE_PATH):
    """Return ``(path, name)`` of the style file to use.

    The default style, or a named style whose file does not exist, resolves
    to ``default_path`` and the default style name.
    """
    if style_name == DEFAULT_STYLE_NAME:
        return default_path, style_name
    path = f"{styles_folder}/{style_name}.ini"
    if not os.path.exists(path):
        return default_path, DEFAULT_STYLE_NAME
    return path, style_name