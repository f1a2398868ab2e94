"""Event bus, input state, tracked dynamic arrays and levelled logging for interactive applications."""

__version__ = "0.1.0"
__all__ = ["array", "event", "input", "log", "memory"]