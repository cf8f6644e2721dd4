"""
PDF export of the preview surface using WeasyPrint.

The whole preview (including the part scrolled out of view) is laid out onto
a single portrait page sized to the surface's full extent.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

import structlog
from weasyprint import CSS, HTML  # type: ignore

from ..exceptions import ExportError
from ..renderer import PreviewSurface
from ..storage import atomic_path

logger = structlog.get_logger()

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
MEASURE_HEIGHT_PX = 100_000

DOCUMENT_SHELL = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="UTF-8"><title>Resume</title></head>
<body>
{body}
</body>
</html>
"""


class PDFExporter:
    """Snapshots a preview surface into a single-page PDF."""

    FILENAME = "resume.pdf"
    ERROR_MESSAGE = "Failed to generate PDF. Please try again."

    def __init__(self, css_file: Optional[Path] = None, scale: float = 2.0):
        """
        Initialize PDF exporter.

        Args:
            css_file: Stylesheet applied to the preview (defaults to the bundled preview.css)
            scale: Output zoom; the page is scale x the surface's CSS pixel size
        """
        self.css_file = Path(css_file) if css_file else STATIC_DIR / "preview.css"
        self.scale = scale

    def _page_css(self, width_px: float, height_px: float) -> CSS:
        return CSS(string=f"@page {{ size: {width_px}px {height_px}px; margin: 0; }}")

    def _layout(self, surface: PreviewSurface, height_px: float):
        """Lay out the surface on pages of the given height."""
        stylesheets = [self._page_css(surface.width_px, height_px)]
        if self.css_file.exists():
            stylesheets.insert(0, CSS(filename=str(self.css_file)))
        else:
            logger.warning("Preview stylesheet not found", css_file=str(self.css_file))

        html_doc = HTML(
            string=DOCUMENT_SHELL.format(body=surface.html),
            base_url=str(STATIC_DIR),
        )
        return html_doc.render(stylesheets=stylesheets)

    @staticmethod
    def _content_height(document) -> float:
        """Total height of the laid-out root element across all pages."""
        height = 0.0
        for page in document.pages:
            page_box = getattr(page, "_page_box", None)
            if page_box is None:
                raise RuntimeError("WeasyPrint page does not expose its layout box")
            for box in page_box.children:
                if getattr(box, "element_tag", None) == "html":
                    height += box.margin_height()
        return height

    def capture_size(self, surface: PreviewSurface) -> tuple[int, int]:
        """
        Measure the surface's full scrollable extent.

        Returns:
            (width, height) in CSS pixels; height is never less than the
            letter-shaped viewport height
        """
        measured = self._layout(surface, MEASURE_HEIGHT_PX)
        content_height = self._content_height(measured)
        height = max(content_height, surface.min_height_px)
        return surface.width_px, math.ceil(height)

    def export(self, surface: Optional[PreviewSurface], output_dir: Path) -> Path:
        """
        Write resume.pdf for the given preview surface.

        Args:
            surface: Rendered preview; None means nothing is rendered
            output_dir: Directory to write into

        Returns:
            Path to the PDF file

        Raises:
            ExportError: If there is no surface or layout/writing fails
        """
        log = logger.bind(export_format="pdf")
        if surface is None:
            log.error("No preview surface to capture")
            raise ExportError(self.ERROR_MESSAGE, export_format="pdf")

        output_pdf = Path(output_dir) / self.FILENAME
        try:
            width, height = self.capture_size(surface)
            log.info(
                "Capturing preview",
                template=surface.template_id.value,
                width=width,
                height=height,
                scale=self.scale,
            )

            document = self._layout(surface, height)
            if len(document.pages) > 1:
                document = document.copy(document.pages[:1])

            with atomic_path(output_pdf) as tmp:
                document.write_pdf(target=str(tmp), zoom=self.scale)
        except Exception as e:
            log.error("PDF export failed", error=str(e), exc_info=True)
            raise ExportError(self.ERROR_MESSAGE, export_format="pdf") from e

        log.info("PDF created", path=str(output_pdf))
        return output_pdf
