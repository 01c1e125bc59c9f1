"""HTML output."""

from bbs_ansi_html.render.html import HtmlEmitter

__all__ = ["HtmlEmitter"]
