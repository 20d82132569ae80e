"""Render example help documents from Markdown to HTML."""

import logging
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from example_catalog.config.defaults import HIGHLIGHT_LANGUAGES

logger = logging.getLogger("example_catalog.loading.markdown")


class MarkdownRenderer:
    """CommonMark renderer that tags fenced code for the client highlighter.

    A fenced block whose language is recognized renders as
    ``<pre><code data-lang="MODE">``, where MODE is the highlighter mode for
    that language. Every other fenced block renders as a plain
    ``<pre><code>``.
    """

    def __init__(self, highlight_languages: Optional[dict[str, str]] = None):
        """Initialize the renderer.

        Args:
            highlight_languages: Map of fence language to highlighter mode.
        """
        if highlight_languages is None:
            highlight_languages = HIGHLIGHT_LANGUAGES
        self.highlight_languages = {
            name.lower(): mode for name, mode in highlight_languages.items()
        }
        self._md = MarkdownIt("commonmark")
        self._md.renderer.rules["fence"] = self._render_fence

    def highlight_mode(self, info: str) -> Optional[str]:
        """Get the highlighter mode for a fence info string, if recognized."""
        language = info.strip().split(maxsplit=1)[0].lower() if info.strip() else ""
        return self.highlight_languages.get(language)

    def render(self, text: str) -> str:
        """Convert Markdown text to HTML."""
        return self._md.render(text)

    def _render_fence(self, tokens, idx, options, env) -> str:
        token = tokens[idx]
        code = escapeHtml(token.content)
        mode = self.highlight_mode(token.info or "")
        if mode is not None:
            return f'<pre><code data-lang="{escapeHtml(mode)}">{code}</code></pre>\n'
        if token.info:
            logger.debug(f"No highlighter mode for fence language '{token.info.strip()}'")
        return f"<pre><code>{code}</code></pre>\n"
