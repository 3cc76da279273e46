# bmppalette

bmppalette counts the colours of a BMP image that uses 24 or 32 bits per
pixel. A client sends the image's most frequent colours to a server over TCP.
The server draws those colours as an SVG pie chart. The same pair also works
as a simple message echo.

## Installation

```
pip install .
```

## Server

```
bmppalette-server [--host HOST] [--port PORT] [--svg PATH]
```

The server listens on port 8089 on all interfaces by default. Each client is
served on its own thread until it disconnects. The server handles every
message it receives as follows:

- If the first word of the message is `message:`, the server sends the
  message back unchanged.
- Otherwise it treats the message as a colour list. It writes a pie chart to
  `--svg` (default `pie_chart.svg`) and opens the file with `firefox`.

Press Ctrl+C to stop the server.

## Client

```
bmppalette-client [--host HOST] [--port PORT] [ARGS ...]
```

By default the client connects to `localhost:8089`. The number of positional
arguments chooses what it does:

- **No arguments.** Interactive chat. The client prompts for lines on
  standard input, sends each one as `message: <text>` and prints the server's
  reply. It stops at end of input.
- **One argument, a BMP image path.** The client analyses the image and sends
  a message such as `couleurs: 10,#ff0000,#00ff00,...`. The message is not
  sent with a newline.
- **More than one argument.** The client reads a single line, sends it as a
  message and prints the reply. The arguments themselves are not sent.

### Contents of the colour message

The number after `couleurs:` is the count of distinct colours, capped at ten.
The hex colours that follow are the most frequent colours, most frequent
first, up to ten of them. The least frequent colour is never among them, so
the list can be one entry shorter than the announced number.

## Library use

```python
from bmppalette.bmp import analyse_bmp_image, read_colors
from bmppalette.client import colors_message
from bmppalette.server import pie_chart_svg, write_pie_chart

counts = analyse_bmp_image("picture.bmp")  # ColorCount entries, least frequent first
message = colors_message(counts)
svg = pie_chart_svg(message)               # SVG text
write_pie_chart(message, "chart.svg")      # writes the file and returns its Path
```

### `bmppalette.colors`

- `Color` holds red, green and blue channels, plus an optional alpha channel.
  Its `hex()` method returns `#rrggbb`.
- `ColorCount` pairs a colour with the number of pixels that have it.
- `BitCount` tells 24-bit colours from 32-bit colours.
- `count_colors` counts distinct colours in the order they first appear.
- `sort_counts` sorts counts from least to most frequent.
- `format_colors` and `format_counts` render colours and counts as
  hexadecimal columns.

Mixing 24-bit and 32-bit colours raises `ValueError`.

### `bmppalette.bmp`

- `parse_header` and `parse_info_header` decode the two BMP headers.
- `read_colors` returns every pixel colour.
- `analyse_bmp_image` counts the colours and sorts them.

A file that is not a BMP image, or whose bit count is not 24 or 32, raises
`BmpError`.

### `bmppalette.server`

- `pie_chart_svg` draws each colour as one tenth of a circle, clockwise from
  the top. More than ten colours raises `ValueError`.
- `message_code` returns the leading word of a message, cut to nine
  characters.
- `handle_message`, `handle_client` and `serve` are the server's message
  handling, connection handling and accept loop.
- `open_in_browser` runs a browser on a file.

## Limitations

- The image reader does not look at the compression field or row padding.
  It reads the number of bytes that the header gives as the image size, so
  only plain uncompressed 24-bit and 32-bit images give meaningful counts.
  Palette-based images are not supported.
- The server always opens the chart with `firefox`. There is no command-line
  option to choose another browser.
- Connections are plain TCP with no authentication or encryption.