"""Rendering Netpbm images for display."""

from netpbm_kit.render.terminal import render_text

__all__ = ["render_text"]
