"""Renderers for rtfhtml.

HtmlEmitter produces the HTML fragments committed by the parser.
"""

from rtfhtml.renderers.html import HtmlEmitter, render_indent, render_span

__all__ = ["HtmlEmitter", "render_indent", "render_span"]
