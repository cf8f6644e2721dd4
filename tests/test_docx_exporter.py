"""
Tests for the Word document exporter.
"""

from unittest.mock import patch

import pytest
from docx import Document

from resume_builder.exceptions import ExportError
from resume_builder.exporters import DocxExporter
from resume_builder.models import ResumeData


@pytest.fixture
def exporter():
    return DocxExporter()


def texts(doc):
    return [p.text for p in doc.paragraphs]


def test_sample_document_structure(exporter, sample_resume):
    """Test the fixed section order and paragraph count for the sample resume."""
    doc = exporter.build_document(sample_resume)
    paragraphs = texts(doc)

    # title block 2, summary 2, experience 1 + 2 * 6, education 1 + 2 * 2, skills 2
    assert len(paragraphs) == 24
    assert paragraphs[0] == "Jane Doe"
    assert paragraphs[1] == (
        "San Francisco, CA | 123-456-7890 | jane.doe@example.com | janedoe.dev"
    )
    assert paragraphs[2] == "SUMMARY"
    assert paragraphs[4] == "EXPERIENCE"
    assert paragraphs[5] == "Senior Software Engineer\t2021-08 - Present"
    assert paragraphs[6] == "Tech Solutions Inc., Palo Alto, CA"
    assert paragraphs[17] == "EDUCATION"
    assert paragraphs[18] == "State University\t2016-09 - 2018-05"
    assert paragraphs[19] == "Master of Science in Computer Science"
    assert paragraphs[22] == "SKILLS"
    assert paragraphs[23].startswith("JavaScript (ES6+) | TypeScript | React")


def test_description_lines_become_bullets(exporter, sample_resume):
    """Test achievements are bulleted with the dash marker stripped."""
    doc = exporter.build_document(sample_resume)
    bullets = [p.text for p in doc.paragraphs if p.style.name == "List Bullet"]

    assert len(bullets) == 6
    assert bullets[0].startswith("Led a team of 5 engineers")
    assert not any(b.startswith("-") for b in bullets)


def test_blank_description_lines_are_skipped(exporter):
    data = ResumeData(experience=[{"id": "e1", "description": "- One\n\n  \n- Two"}])
    doc = exporter.build_document(data)
    bullets = [p.text for p in doc.paragraphs if p.style.name == "List Bullet"]
    assert bullets == ["One", "Two"]


def test_title_and_headers_are_bold(exporter, sample_resume):
    doc = exporter.build_document(sample_resume)
    assert doc.paragraphs[0].runs[0].bold
    assert doc.paragraphs[2].runs[0].bold
    assert doc.paragraphs[6].runs[0].italic


def test_empty_resume_keeps_section_headers(exporter):
    """Test an empty resume still gets every section header."""
    paragraphs = texts(exporter.build_document(ResumeData()))
    for header in ("SUMMARY", "EXPERIENCE", "EDUCATION", "SKILLS"):
        assert header in paragraphs
    assert paragraphs[-1] == ""


def test_document_metadata(exporter, sample_resume):
    doc = exporter.build_document(sample_resume)
    assert doc.core_properties.title == "Jane Doe - Resume"
    assert doc.core_properties.author == "Jane Doe"


def test_export_writes_file(exporter, sample_resume, tmp_path):
    path = exporter.export(sample_resume, tmp_path / "out")

    assert path == tmp_path / "out" / "resume.docx"
    assert texts(Document(str(path)))[0] == "Jane Doe"


def test_export_failure_raises_and_leaves_no_file(exporter, sample_resume, tmp_path):
    """Test build errors surface the generic message and nothing is written."""
    with patch.object(DocxExporter, "build_document", side_effect=RuntimeError("boom")):
        with pytest.raises(ExportError) as exc_info:
            exporter.export(sample_resume, tmp_path)

    assert exc_info.value.message == "Failed to generate DOCX. Please try again."
    assert exc_info.value.export_format == "docx"
    assert not (tmp_path / "resume.docx").exists()


def test_failed_export_keeps_previous_file(exporter, sample_resume, tmp_path):
    """Test a failed re-export leaves the last good resume.docx byte-identical."""
    path = exporter.export(sample_resume, tmp_path)
    previous = path.read_bytes()

    with patch.object(DocxExporter, "build_document", side_effect=RuntimeError("boom")):
        with pytest.raises(ExportError):
            exporter.export(sample_resume, tmp_path)

    assert path.read_bytes() == previous
    assert [p.name for p in tmp_path.iterdir()] == ["resume.docx"]


def test_save_failure_keeps_previous_file(exporter, sample_resume, tmp_path):
    """Test a save that dies midway does not replace the existing document."""
    path = tmp_path / "resume.docx"
    path.write_bytes(b"previous")

    def half_save(doc, target):
        with open(target, "wb") as f:
            f.write(b"partial")
        raise OSError("disk full")

    with patch("docx.document.Document.save", half_save):
        with pytest.raises(ExportError):
            exporter.export(sample_resume, tmp_path)

    assert path.read_bytes() == b"previous"
    assert [p.name for p in tmp_path.iterdir()] == ["resume.docx"]
