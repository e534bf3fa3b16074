"""Command-line interface for netpbm-kit."""

from netpbm_kit.cli.app import create_app

__all__ = ["create_app"]
