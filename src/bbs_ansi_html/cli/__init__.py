"""Command-line interface for bbs-ansi-html."""

from bbs_ansi_html.cli.app import create_app
from bbs_ansi_html.cli.main import main

__all__ = ["create_app", "main"]
