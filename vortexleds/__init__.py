"""Colour types and conversions, colorsets, LED bitmaps and in-memory LED state."""

__version__ = "0.1.0"
__all__ = ["constants", "ledtypes", "colors", "colorset", "leds"]