"""Command-line remote control for the image-editing server."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .client import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TIMEOUT, CommandClient, ServerUnavailable
from .commands import (
    Command,
    Rgb,
    format_command,
    open_image,
    set_border_color,
    set_fill_color,
    success_message,
)

_SIMPLE_ACTIONS = {
    "saveas": Command.SAVEAS,
    "flip-h": Command.FLIP_H,
    "flip-v": Command.FLIP_V,
    "channel-r": Command.CHANNEL_R,
    "channel-g": Command.CHANNEL_G,
    "channel-b": Command.CHANNEL_B,
    "draw-line": Command.DRAW_LINE,
    "draw-rect": Command.DRAW_RECT,
    "draw-ellipse": Command.DRAW_ELLIPSE,
    "save": Command.SAVE,
}

_COLOR_ACTIONS = {
    "fill-color": (Command.SET_FILLCOLOR, set_fill_color),
    "border-color": (Command.SET_BORDERCOLOR, set_border_color),
}


def _channel(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"colour channel must be in 0..255: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per server command."""
    parser = argparse.ArgumentParser(
        prog="imgremote", description="Send editing commands to the image server."
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    actions = parser.add_subparsers(dest="action", required=True)

    open_parser = actions.add_parser("open", help="open an image file on the server")
    open_parser.add_argument("path")

    for name, command in _SIMPLE_ACTIONS.items():
        actions.add_parser(name, help=f"send {command.value}")

    for name, (command, _) in _COLOR_ACTIONS.items():
        color_parser = actions.add_parser(name, help=f"send {command.value}")
        for channel in ("red", "green", "blue"):
            color_parser.add_argument(channel, type=_channel)
    return parser


def _resolve(parser: argparse.ArgumentParser, args: argparse.Namespace) -> tuple[Command, str]:
    if args.action == "open":
        path = Path(args.path)
        if not path.is_file():
            parser.error(f"file does not exist: {args.path}")
        return Command.OPEN, open_image(str(path.absolute()))
    if args.action in _COLOR_ACTIONS:
        command, build = _COLOR_ACTIONS[args.action]
        return command, build(Rgb(args.red, args.green, args.blue))
    command = _SIMPLE_ACTIONS[args.action]
    return command, format_command(command)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, send one command and report the outcome."""
    parser = build_parser()
    args = parser.parse_args(argv)
    command, text = _resolve(parser, args)
    try:
        CommandClient(args.host, args.port, args.timeout).send(text)
    except ServerUnavailable:
        print("Failed to connect to server!", file=sys.stderr)
        return 1
    print(success_message(command))
    return 0


if __name__ == "__main__":
    sys.exit(main())