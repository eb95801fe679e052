"""Post random images from a Gelbooru-compatible board to Misskey."""

__version__ = "0.1.0"