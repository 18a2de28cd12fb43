"""Headless-browser PDF rendering.

Each render launches its own Chromium and closes it before returning.
Browsers are never pooled or reused between requests.
"""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from html import escape
from typing import Any, Optional

from playwright.sync_api import sync_playwright

from pdf_enhancer.config.settings import RenderSettings, render_settings

logger = logging.getLogger(__name__)

_HEADER_TEMPLATE = (
    '<div style="font-size: 10px; width: 100%; text-align: center; color: #666;">{title}</div>'
)
_FOOTER_TEMPLATE = (
    '<div style="font-size: 10px; width: 100%; text-align: center; color: #666;">'
    'Page <span class="pageNumber"></span> of <span class="totalPages"></span>'
    "</div>"
)


class BasePdfRenderer(ABC):
    """Turns HTML into PDF bytes."""

    @abstractmethod
    def render(self, html: str, *, title: str = "") -> bytes:
        raise NotImplementedError


class PlaywrightPdfRenderer(BasePdfRenderer):
    """Chromium print-to-PDF via Playwright's sync API.

    The sync API refuses to run inside a running event loop; call it from a
    worker thread when serving async requests.
    """

    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings or render_settings

    def page_options(self, title: str) -> dict[str, Any]:
        s = self.settings
        return {
            "format": s.format,
            "print_background": True,
            "margin": {
                "top": s.margin_top,
                "bottom": s.margin_bottom,
                "left": s.margin_left,
                "right": s.margin_right,
            },
            "display_header_footer": True,
            "header_template": _HEADER_TEMPLATE.format(title=escape(title)),
            "footer_template": _FOOTER_TEMPLATE,
        }

    def render(self, html: str, *, title: str = "") -> bytes:
        deadline = self.settings.render_deadline_seconds
        timer = threading.Timer(
            deadline,
            logger.warning,
            args=("PDF rendering exceeded %.0fs advisory deadline", deadline),
        )
        timer.daemon = True
        started = time.monotonic()
        timer.start()
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=True, args=list(self.settings.chromium_args))
                try:
                    page = browser.new_page()
                    page.set_content(html, wait_until="networkidle")
                    pdf = page.pdf(**self.page_options(title))
                finally:
                    browser.close()
        finally:
            timer.cancel()

        logger.info("Rendered PDF (%d bytes) in %.1fs", len(pdf), time.monotonic() - started)
        return pdf


__all__ = ["BasePdfRenderer", "PlaywrightPdfRenderer"]
