"""Terminal SGR attribute codes and firmware version information."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "FIRMWARE_VERSION_NUM",
    "FW_CODENAME",
    "FW_CODENAME_QUOTED",
    "FW_VERSION",
    "FW_V_MAJOR",
    "FW_V_MINOR",
    "FW_V_PATCH",
    "FW_V_SUFFIX",
    "SgrCode",
    "VERSION_STRING",
]


class SgrCode(IntEnum):
    """Select Graphic Rendition parameter values."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    BLINK_FAST = 6
    INVERSE = 7
    CONCEAL = 8
    STRIKE = 9
    FRAKTUR = 20
    OVERLINE = 53

    NO_BOLD = 21
    NO_BOLD_FAINT = 22
    NO_ITALIC_FRACTUR = 23
    NO_UNDERLINE = 24
    NO_BLINK = 25
    NO_INVERSE = 27
    NO_CONCEAL = 28
    NO_STRIKE = 29
    NO_OVERLINE = 55

    FG_START = 30
    FG_END = 37
    FG_256 = 38
    FG_DEFAULT = 39

    BG_START = 40
    BG_END = 47
    BG_256 = 48
    BG_DEFAULT = 49

    FG_BRT_START = 90
    FG_BRT_END = 97

    BG_BRT_START = 100
    BG_BRT_END = 107


FW_V_MAJOR = 2
FW_V_MINOR = 4
FW_V_PATCH = 0
FW_V_SUFFIX = "-pre2"
FW_CODENAME = "Damselfly"
FW_CODENAME_QUOTED = f'"{FW_CODENAME}"'

FW_VERSION = f"{FW_V_MAJOR}.{FW_V_MINOR}.{FW_V_PATCH}{FW_V_SUFFIX}"
VERSION_STRING = f"{FW_VERSION} {FW_CODENAME_QUOTED}"

FIRMWARE_VERSION_NUM = FW_V_MAJOR * 1000 + FW_V_MINOR * 10 + FW_V_PATCH
"""Numeric version reported in terminal identification queries."""