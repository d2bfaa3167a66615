# imgremote

A small client for remote-controlling an image server that listens on a TCP
port. Each action (open an image, flip it, extract a colour channel, draw a
shape, change colours, save) is one short text command. It is sent over a
fresh connection, which is closed straight after.

By default the server is expected at `127.0.0.1`, port `9999`, with a
connection timeout of 5 seconds.

## Commands understood by the server

| Command                     | Effect                                   |
|-----------------------------|------------------------------------------|
| `OPEN <path>`               | open an image file                       |
| `SAVE`                      | save the current image                   |
| `SAVEAS`                    | save the current image under a new name  |
| `FLIP_H`                    | mirror left to right                     |
| `FLIP_V`                    | mirror top to bottom                     |
| `CHANNEL_R` / `_G` / `_B`   | keep only the red, green or blue channel |
| `DRAW_LINE`                 | draw a line                              |
| `DRAW_RECT`                 | draw a rectangle                         |
| `DRAW_ELLIPSE`              | draw an ellipse                          |
| `SET_FILLCOLOR r g b`       | set the fill colour (0–255 each)         |
| `SET_BORDERCOLOR r g b`     | set the outline colour (0–255 each)      |

A command is the command word followed by its arguments, separated by single
spaces. It is encoded as cp949 (characters that cannot be encoded are
replaced) and sent with no terminator. No reply is read.

## Installation

```
pip install .
```

## Command line

The `imgremote` command sends one command and reports whether it went
through:

```
imgremote [--host HOST] [--port PORT] [--timeout SECONDS] ACTION [ARGS]
```

Actions:

| Action                      | Sends                          |
|-----------------------------|--------------------------------|
| `open PATH`                 | `OPEN <absolute path>`         |
| `save`                      | `SAVE`                         |
| `saveas`                    | `SAVEAS`                       |
| `flip-h`, `flip-v`          | `FLIP_H`, `FLIP_V`             |
| `channel-r`, `channel-g`, `channel-b` | `CHANNEL_R`, `CHANNEL_G`, `CHANNEL_B` |
| `draw-line`, `draw-rect`, `draw-ellipse` | `DRAW_LINE`, `DRAW_RECT`, `DRAW_ELLIPSE` |
| `fill-color R G B`          | `SET_FILLCOLOR R G B`          |
| `border-color R G B`        | `SET_BORDERCOLOR R G B`        |

`open` refuses a path that is not an existing file. Colour channels must be
integers from 0 to 255. For the full option list, run:

```
imgremote --help
```

On success a confirmation such as `Horizontal flip command sent!` is printed
and the exit status is 0. If the server cannot be reached,
`Failed to connect to server!` is printed to standard error and the exit
status is 1.

## Library use

```python
from imgremote.commands import Command, Rgb, format_command, open_image, set_fill_color
from imgremote.client import CommandClient, ServerUnavailable, send_command

send_command(open_image("photo.png"))
send_command(format_command(Command.FLIP_H))
send_command(set_fill_color(Rgb(255, 128, 0)))
```

- `imgremote.commands`
  - `Command` enumerates the command words.
  - `format_command(command, *args)` joins a command word and its arguments.
  - `open_image(path)` builds an `OPEN` command; an empty path raises
    `ValueError`.
  - `set_fill_color(color)` and `set_border_color(color)` build the colour
    commands.
  - `Rgb(red, green, blue)` is a colour whose channels must be ints in
    0..255. `Rgb.from_colorref(value)` builds one from a packed `0x00BBGGRR`
    integer.
  - `success_message(command)` gives the confirmation text for a command.
- `imgremote.client`
  - `CommandClient(host, port, timeout)` sends each command with `send(text)`
    on its own connection and returns the number of bytes sent.
  - `send_command(text, host, port, timeout)` does the same in one call.
  - `ServerUnavailable` (a `ConnectionError`) is raised when no connection
    can be made.

## What this package does not do

It is only the client. It contains no image server, does no image editing
itself, and has no graphical interface: file and colour choices are given on
the command line or in code.

## Running the tests

```
pip install .[test]
pytest
```