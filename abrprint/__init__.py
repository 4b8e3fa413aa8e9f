"""Bar graphs of Abricate summary tables, drawn with Pillow."""

__version__ = "0.1.0"