"""Pixel buffers, a pit sign layout, lighting styles, push buttons and a status display for LED signs."""

__version__ = "0.1.0"