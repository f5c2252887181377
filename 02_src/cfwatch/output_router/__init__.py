"""OutputRouter module."""

from .router import ListSink, OutputRouter, render_plain, render_text

__all__ = ["ListSink", "OutputRouter", "render_plain", "render_text"]
