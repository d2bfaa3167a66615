"""Commands understood by the image-editing server and helpers to build them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    """Command words sent to the server."""

    OPEN = "OPEN"
    SAVEAS = "SAVEAS"
    FLIP_H = "FLIP_H"
    FLIP_V = "FLIP_V"
    CHANNEL_R = "CHANNEL_R"
    CHANNEL_G = "CHANNEL_G"
    CHANNEL_B = "CHANNEL_B"
    DRAW_LINE = "DRAW_LINE"
    DRAW_RECT = "DRAW_RECT"
    DRAW_ELLIPSE = "DRAW_ELLIPSE"
    SAVE = "SAVE"
    SET_FILLCOLOR = "SET_FILLCOLOR"
    SET_BORDERCOLOR = "SET_BORDERCOLOR"


@dataclass(frozen=True)
class Rgb:
    """An 8-bit-per-channel colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in 0..255, got {value}")

    @classmethod
    def from_colorref(cls, value: int) -> "Rgb":
        """Build a colour from a packed 0x00BBGGRR value."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"colour value must be an int, got {value!r}")
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"colour value out of range: {value}")
        return cls(value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF)

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue


def format_command(command: Command, *args: object) -> str:
    """Return the wire text for a command followed by its arguments."""
    return " ".join([Command(command).value, *(str(arg) for arg in args)])


def open_image(path: str) -> str:
    """Return the command that asks the server to open an image file."""
    if not path:
        raise ValueError("an image path is required")
    return format_command(Command.OPEN, path)


def set_fill_color(color: Rgb) -> str:
    """Return the command that sets the fill colour."""
    return format_command(Command.SET_FILLCOLOR, *color)


def set_border_color(color: Rgb) -> str:
    """Return the command that sets the border colour."""
    return format_command(Command.SET_BORDERCOLOR, *color)


_SUCCESS_MESSAGES = {
    Command.OPEN: "Open image command sent!",
    Command.SAVEAS: "Save as command sent!",
    Command.FLIP_H: "Horizontal flip command sent!",
    Command.FLIP_V: "Vertical flip command sent!",
    Command.CHANNEL_R: "R channel extraction command sent!",
    Command.CHANNEL_G: "G channel extraction command sent!",
    Command.CHANNEL_B: "B channel extraction command sent!",
    Command.DRAW_LINE: "Draw line command sent!",
    Command.DRAW_RECT: "Draw rectangle command sent!",
    Command.DRAW_ELLIPSE: "Draw ellipse command sent!",
    Command.SAVE: "Save command sent!",
    Command.SET_FILLCOLOR: "Fill colour command sent!",
    Command.SET_BORDERCOLOR: "Border colour command sent!",
}


def success_message(command: Command) -> str:
    """Return the message reported after a command was delivered."""
    return _SUCCESS_MESSAGES[Command(command)]