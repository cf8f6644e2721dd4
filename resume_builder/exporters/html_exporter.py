"""
Standalone HTML export of the preview surface.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import structlog

from ..exceptions import ExportError
from ..renderer import PreviewSurface
from ..storage import atomic_path

logger = structlog.get_logger()

DEFAULT_STYLESHEET_URL = "https://cdn.tailwindcss.com"

HTML_SHELL = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Resume</title>
  {stylesheet_tag}
</head>
<body>
{body}
</body>
</html>
"""


def build_html_document(
    surface: PreviewSurface, stylesheet_url: str = DEFAULT_STYLESHEET_URL
) -> str:
    """Wrap the preview markup, verbatim, in a minimal document shell."""
    if stylesheet_url.endswith(".css"):
        tag = f'<link rel="stylesheet" href="{stylesheet_url}">'
    else:
        tag = f'<script src="{stylesheet_url}"></script>'
    return HTML_SHELL.format(stylesheet_tag=tag, body=surface.html)


class HTMLExporter:
    """Writes resume.html from a preview surface."""

    FILENAME = "resume.html"
    ERROR_MESSAGE = "Failed to generate HTML. Please try again."

    def __init__(self, stylesheet_url: str = DEFAULT_STYLESHEET_URL):
        self.stylesheet_url = stylesheet_url

    def export(self, surface: Optional[PreviewSurface], output_dir: Path) -> Optional[Path]:
        """
        Write resume.html for the given preview surface.

        Returns:
            Path to the HTML file, or None when there is no surface
        """
        if surface is None:
            logger.warning("No preview surface, skipping HTML export")
            return None

        output_html = Path(output_dir) / self.FILENAME
        try:
            with atomic_path(output_html) as tmp:
                tmp.write_text(
                    build_html_document(surface, self.stylesheet_url), encoding="utf-8"
                )
        except OSError as e:
            logger.error("HTML export failed", error=str(e))
            raise ExportError(self.ERROR_MESSAGE, export_format="html") from e

        logger.info("HTML created", path=str(output_html), template=surface.template_id.value)
        return output_html
