"""
Tests for the standalone HTML exporter.
"""

from unittest.mock import patch

import pytest

from resume_builder.exceptions import ExportError
from resume_builder.exporters import HTMLExporter, build_html_document
from resume_builder.renderer import PreviewRenderer


@pytest.fixture
def surface(sample_resume):
    return PreviewRenderer().render(sample_resume, "classic")


def test_document_wraps_preview_verbatim(surface):
    """Test the preview markup is embedded unchanged in a full document."""
    document = build_html_document(surface)

    assert document.startswith("<!DOCTYPE html>")
    assert '<html lang="en">' in document
    assert '<meta charset="UTF-8">' in document
    assert "<title>Resume</title>" in document
    assert surface.html in document


def test_default_stylesheet_is_script(surface):
    document = build_html_document(surface)
    assert '<script src="https://cdn.tailwindcss.com"></script>' in document


def test_css_stylesheet_is_link(surface):
    document = build_html_document(surface, "https://example.com/site.css")
    assert '<link rel="stylesheet" href="https://example.com/site.css">' in document


def test_export_writes_file(surface, tmp_path):
    path = HTMLExporter().export(surface, tmp_path)

    assert path == tmp_path / "resume.html"
    assert surface.html in path.read_text(encoding="utf-8")


def test_export_without_surface_is_noop(tmp_path):
    """Test a missing surface writes nothing and raises nothing."""
    assert HTMLExporter().export(None, tmp_path) is None
    assert not (tmp_path / "resume.html").exists()


def test_write_failure_raises_export_error(surface, tmp_path):
    with patch("pathlib.Path.write_text", side_effect=OSError("disk full")):
        with pytest.raises(ExportError) as exc_info:
            HTMLExporter().export(surface, tmp_path)

    assert exc_info.value.message == "Failed to generate HTML. Please try again."


def test_write_failure_keeps_previous_file(surface, tmp_path):
    path = tmp_path / "resume.html"
    path.write_text("<p>previous</p>", encoding="utf-8")

    with patch("pathlib.Path.write_text", side_effect=OSError("disk full")):
        with pytest.raises(ExportError):
            HTMLExporter().export(surface, tmp_path)

    assert path.read_text(encoding="utf-8") == "<p>previous</p>"
    assert [p.name for p in tmp_path.iterdir()] == ["resume.html"]
