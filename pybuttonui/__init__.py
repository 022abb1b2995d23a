"""Stateful, styleable pygame buttons, a small widget interface and a demo window."""

__version__ = "0.1.0"
__all__ = ["ui", "button", "client"]