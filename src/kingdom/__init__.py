"""Kingdom Fantasy: magical structures and the rules that bind them."""

__version__ = "0.1.0"
