"""
Tests for the PDF exporter.
"""

from unittest.mock import MagicMock, patch

import pytest

from resume_builder.exceptions import ExportError
from resume_builder.exporters import PDFExporter
from resume_builder.exporters.pdf_exporter import MEASURE_HEIGHT_PX
from resume_builder.models import ResumeData
from resume_builder.renderer import PreviewRenderer


@pytest.fixture
def renderer():
    return PreviewRenderer()


def test_missing_surface_raises(tmp_path):
    """Test exporting with nothing rendered fails with the generic message."""
    with pytest.raises(ExportError) as exc_info:
        PDFExporter().export(None, tmp_path)

    assert exc_info.value.message == "Failed to generate PDF. Please try again."
    assert not (tmp_path / "resume.pdf").exists()


def test_layout_failure_leaves_no_file(renderer, sample_resume, tmp_path):
    surface = renderer.render(sample_resume)
    with patch.object(PDFExporter, "_layout", side_effect=RuntimeError("layout")):
        with pytest.raises(ExportError):
            PDFExporter().export(surface, tmp_path)

    assert not (tmp_path / "resume.pdf").exists()


def test_capture_size_never_below_viewport(renderer, tmp_path):
    """Test an almost empty resume still produces a letter-shaped page."""
    surface = renderer.render(ResumeData(), "classic")
    width, height = PDFExporter().capture_size(surface)

    assert width == surface.width_px
    assert height >= surface.min_height_px


def test_long_resume_grows_past_viewport(renderer, sample_resume):
    """Test content taller than the viewport is captured in full."""
    long_resume = sample_resume.model_copy(
        update={"experience": sample_resume.experience * 8}
    )
    surface = renderer.render(long_resume, "modern")
    _, height = PDFExporter().capture_size(surface)

    assert height > surface.min_height_px


def test_export_writes_pdf(renderer, sample_resume, tmp_path):
    surface = renderer.render(sample_resume, "creative")
    path = PDFExporter(scale=1).export(surface, tmp_path)

    assert path == tmp_path / "resume.pdf"
    assert path.read_bytes().startswith(b"%PDF")


def test_failed_export_keeps_previous_file(renderer, sample_resume, tmp_path):
    """Test a failed re-export does not delete the last good resume.pdf."""
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"%PDF-previous")
    surface = renderer.render(sample_resume)

    with patch.object(PDFExporter, "_layout", side_effect=RuntimeError("layout")):
        with pytest.raises(ExportError):
            PDFExporter().export(surface, tmp_path)

    assert path.read_bytes() == b"%PDF-previous"
    assert [p.name for p in tmp_path.iterdir()] == ["resume.pdf"]


def test_content_height_measures_layout(renderer, sample_resume):
    """Test the measured height comes from the real WeasyPrint layout."""
    surface = renderer.render(sample_resume, "modern")
    document = PDFExporter()._layout(surface, MEASURE_HEIGHT_PX)

    height = PDFExporter._content_height(document)

    assert len(document.pages) == 1
    assert 0 < height < MEASURE_HEIGHT_PX


def test_missing_layout_box_fails_export(renderer, sample_resume, tmp_path):
    """Test a WeasyPrint page without a layout box fails with the generic message."""
    surface = renderer.render(sample_resume)
    page = MagicMock(spec=[])
    document = MagicMock(pages=[page])

    with patch.object(PDFExporter, "_layout", return_value=document):
        with pytest.raises(ExportError) as exc_info:
            PDFExporter().export(surface, tmp_path)

    assert exc_info.value.message == "Failed to generate PDF. Please try again."
    assert not (tmp_path / "resume.pdf").exists()
