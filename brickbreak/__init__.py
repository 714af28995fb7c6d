"""A brick-breaking arcade game: paddle, ball, tile-based levels and a pygame front end."""

__version__ = "0.1.0"