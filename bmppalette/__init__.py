"""BMP colour counting, with a TCP client and a server that draws colours as an SVG pie chart."""

__version__ = "0.1.0"