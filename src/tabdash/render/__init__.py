"""Renderers for writing a Canvas out."""

from tabdash.render.terminal import TerminalRenderer, render_plain

__all__ = ["TerminalRenderer", "render_plain"]
