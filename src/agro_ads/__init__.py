"""Ad copy and image generation for animal feed sellers."""

__version__ = "0.1.0"
