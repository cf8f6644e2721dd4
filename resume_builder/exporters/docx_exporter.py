"""
Word document export built directly from the resume data.

The layout is fixed (title block, SUMMARY, EXPERIENCE, EDUCATION, SKILLS)
and does not follow the template chosen for the preview.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from docx import Document  # type: ignore
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_TAB_ALIGNMENT  # type: ignore
from docx.oxml import OxmlElement  # type: ignore
from docx.oxml.ns import qn  # type: ignore
from docx.shared import Pt  # type: ignore

from ..exceptions import ExportError
from ..models import ResumeData, description_lines, join_skills
from ..storage import atomic_path

logger = structlog.get_logger()

BULLET_STYLE = "List Bullet"

# successors of w:pBdr inside w:pPr, in schema order
_PBDR_SUCCESSORS = (
    "w:shd", "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap",
    "w:overflowPunct", "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN",
    "w:bidi", "w:adjustRightInd", "w:snapToGrid", "w:spacing", "w:ind",
    "w:contextualSpacing", "w:mirrorIndents", "w:suppressOverlap", "w:jc",
    "w:textDirection", "w:textAlignment", "w:textboxTightWrap",
    "w:outlineLvl", "w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange",
)


def _add_bottom_border(paragraph) -> None:
    """Draw a single rule under a paragraph."""
    pPr = paragraph._p.get_or_add_pPr()
    pBdr = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), "6")
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), "auto")
    pBdr.append(bottom)
    pPr.insert_element_before(pBdr, *_PBDR_SUCCESSORS)


class DocxExporter:
    """Builds resume.docx from ResumeData."""

    FILENAME = "resume.docx"
    ERROR_MESSAGE = "Failed to generate DOCX. Please try again."

    FONT_NAME = "Arial"
    BODY_PT = 11
    NAME_PT = 22
    HEADER_PT = 12

    def build_document(self, data: ResumeData):
        """
        Build the Word document in memory.

        Args:
            data: Resume data

        Returns:
            python-docx Document
        """
        doc = Document()
        self._apply_default_font(doc)
        self._set_document_metadata(doc, data)
        right_tab = self._text_width(doc)

        info = data.personal_info

        # Title block
        p = doc.add_paragraph()
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = p.add_run(info.name)
        run.bold = True
        run.font.size = Pt(self.NAME_PT)

        p = doc.add_paragraph(info.contact_line)
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER
        p.paragraph_format.space_after = Pt(10)

        # Summary
        self._add_section_header(doc, "SUMMARY")
        p = doc.add_paragraph(info.summary)
        p.paragraph_format.space_after = Pt(20)

        # Experience
        self._add_section_header(doc, "EXPERIENCE")
        for exp in data.experience:
            p = doc.add_paragraph()
            p.paragraph_format.tab_stops.add_tab_stop(right_tab, WD_TAB_ALIGNMENT.RIGHT)
            p.add_run(exp.job_title).bold = True
            p.add_run(f"\t{exp.date_range}").bold = True

            p = doc.add_paragraph()
            p.add_run(f"{exp.company}, {exp.location}").italic = True
            p.paragraph_format.space_after = Pt(5)

            for line in description_lines(exp.description):
                doc.add_paragraph(line, style=BULLET_STYLE)

            spacer = doc.add_paragraph("")
            spacer.paragraph_format.space_after = Pt(10)

        # Education
        self._add_section_header(doc, "EDUCATION")
        for edu in data.education:
            p = doc.add_paragraph()
            p.paragraph_format.tab_stops.add_tab_stop(right_tab, WD_TAB_ALIGNMENT.RIGHT)
            p.add_run(edu.institution).bold = True
            p.add_run(f"\t{edu.date_range}")

            p = doc.add_paragraph(f"{edu.degree} in {edu.field_of_study}")
            p.paragraph_format.space_after = Pt(10)

        # Skills
        self._add_section_header(doc, "SKILLS")
        doc.add_paragraph(join_skills(data.skills))

        return doc

    def export(self, data: ResumeData, output_dir: Path) -> Path:
        """
        Write resume.docx for the given data.

        Raises:
            ExportError: If building or saving the document fails
        """
        log = logger.bind(export_format="docx")
        output_docx = Path(output_dir) / self.FILENAME
        try:
            doc = self.build_document(data)
            with atomic_path(output_docx) as tmp:
                doc.save(str(tmp))
        except Exception as e:
            log.error("DOCX export failed", error=str(e), exc_info=True)
            raise ExportError(self.ERROR_MESSAGE, export_format="docx") from e

        log.info(
            "DOCX created",
            path=str(output_docx),
            experience=len(data.experience),
            education=len(data.education),
        )
        return output_docx

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _apply_default_font(self, doc) -> None:
        normal = doc.styles["Normal"]
        normal.font.name = self.FONT_NAME
        normal.font.size = Pt(self.BODY_PT)
        rPr = normal.element.get_or_add_rPr()
        rFonts = rPr.get_or_add_rFonts()
        rFonts.set(qn("w:eastAsia"), self.FONT_NAME)

    def _set_document_metadata(self, doc, data: ResumeData) -> None:
        name = data.personal_info.name
        cp = doc.core_properties
        cp.title = f"{name} - Resume" if name else "Resume"
        cp.subject = "Resume"
        if name:
            cp.author = name

    @staticmethod
    def _text_width(doc):
        sec = doc.sections[0]
        return sec.page_width - sec.left_margin - sec.right_margin

    def _add_section_header(self, doc, title: str):
        p = doc.add_paragraph()
        run = p.add_run(title)
        run.bold = True
        run.font.size = Pt(self.HEADER_PT)
        p.paragraph_format.space_after = Pt(10)
        _add_bottom_border(p)
        return p
