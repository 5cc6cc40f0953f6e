"""Timer-style playback of finished traces."""

from quicktrace.playback.autoplay import AutoPlayer

__all__ = ["AutoPlayer"]
