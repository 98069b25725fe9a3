"""Post-render hooks applied to assembled pages.

Hooks run once, after fragments have been inserted into a page, and only
touch the elements present at that moment.
"""

import logging
from collections.abc import Iterable

from lxml import html

logger = logging.getLogger(__name__)

AUDIO_CONTROLS_XPATH = "//audio[contains(concat(' ', normalize-space(@class), ' '), ' audio-player ')]"


def disable_context_menu(controls: Iterable[html.HtmlElement]) -> int:
    """Suppress the context menu on each control.

    Args:
        controls: Elements to update in place

    Returns:
        Number of controls updated
    """
    count = 0
    for control in controls:
        control.set("oncontextmenu", "return false;")
        count += 1
    return count


def find_audio_controls(root: html.HtmlElement) -> list[html.HtmlElement]:
    """Audio players in a parsed page."""
    return root.xpath(AUDIO_CONTROLS_XPATH)


def apply_post_render_hooks(page_html: str) -> str:
    """Run post-render hooks over a complete HTML page.

    Args:
        page_html: Full document markup, including the doctype

    Returns:
        The updated markup
    """
    root = html.document_fromstring(page_html)
    updated = disable_context_menu(find_audio_controls(root))
    logger.debug("Disabled context menu on %d audio controls", updated)

    return html.tostring(
        root,
        doctype="<!DOCTYPE html>",
        encoding="unicode",
        method="html",
    )
