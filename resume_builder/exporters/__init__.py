"""Export utilities."""

from .docx_exporter import DocxExporter
from .html_exporter import HTMLExporter, build_html_document
from .pdf_exporter import PDFExporter

__all__ = ["DocxExporter", "HTMLExporter", "PDFExporter", "build_html_document"]
