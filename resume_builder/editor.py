"""
Editor session: the single owner of resume state.

All edits go through the explicit update operations below; each one
replaces the resume value and writes it to storage. Export and AI actions
are coroutines that toggle the loading flag and turn failures into the
error banner text.
"""

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, TypeVar, Union

import structlog
from pydantic import BaseModel

from .assistant import EMPTY_JOB_DESCRIPTION, AIAssistClient
from .config import AppConfig
from .exceptions import ConfigurationError, ExportError, InputValidationError, ResumeBuilderError
from .exporters import DocxExporter, HTMLExporter, PDFExporter
from .models import (
    DEFAULT_TEMPLATE,
    PRESENT,
    SAMPLE_RESUME,
    AIFeedback,
    ATSReport,
    Education,
    JobMatchResult,
    PersonalInfo,
    ResumeData,
    Skill,
    TemplateId,
    WorkExperience,
    new_entry_id,
)
from .renderer import PreviewRenderer, PreviewSurface, resolve_template_id
from .storage import FEEDBACK_SLOT, PENDING_AI_SLOT, RESUME_SLOT, PersistentValue, SlotStore

logger = structlog.get_logger()

SUMMARY_FIELD_KEY = "personalInfo.summary"

T = TypeVar("T")


def _resolve_field(model_cls: Type[BaseModel], field: str, kind: str) -> str:
    """Map a snake_case or camelCase field name to the model attribute."""
    for name, info in model_cls.model_fields.items():
        if name == "id":
            continue
        if field in (name, info.alias):
            return name
    raise InputValidationError(f"Unknown {kind} field: {field}")


def _check_index(items: List[Any], index: int, kind: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"No {kind} entry at index {index}")


class EditorSession:
    """Application state: resume, template choice, loading flag and error banner."""

    def __init__(
        self,
        store: SlotStore,
        output_dir: Path,
        assistant: Optional[AIAssistClient] = None,
        renderer: Optional[PreviewRenderer] = None,
        template: Union[str, TemplateId] = DEFAULT_TEMPLATE,
        pdf_exporter: Optional[PDFExporter] = None,
        docx_exporter: Optional[DocxExporter] = None,
        html_exporter: Optional[HTMLExporter] = None,
    ):
        self.output_dir = Path(output_dir)
        self.assistant = assistant
        self.renderer = renderer or PreviewRenderer()
        self.template = resolve_template_id(template)
        self.pdf_exporter = pdf_exporter or PDFExporter()
        self.docx_exporter = docx_exporter or DocxExporter()
        self.html_exporter = html_exporter or HTMLExporter()

        self._resume_value = PersistentValue(store, RESUME_SLOT, ResumeData, SAMPLE_RESUME)
        self._feedback_value = PersistentValue(store, FEEDBACK_SLOT, List[AIFeedback], [])
        self._ai_text_value = PersistentValue(store, PENDING_AI_SLOT, Dict[str, str], {})
        self.resume: ResumeData = self._resume_value.load()
        self.feedback: List[AIFeedback] = self._feedback_value.load()

        self.is_loading = False
        self.error: Optional[str] = None
        self.job_match: Optional[JobMatchResult] = None
        self.ats_report: Optional[ATSReport] = None
        self._ai_text: Dict[str, str] = self._ai_text_value.load()

    @classmethod
    def from_config(cls, config: AppConfig) -> "EditorSession":
        """Build a session with storage, renderer, exporters and assistant from config."""
        return cls(
            store=SlotStore(config.storage_dir),
            output_dir=config.output_dir,
            assistant=AIAssistClient(config),
            renderer=PreviewRenderer(width_px=config.preview_width_px),
            template=config.default_template,
            pdf_exporter=PDFExporter(scale=config.pdf_scale),
            html_exporter=HTMLExporter(stylesheet_url=config.html_stylesheet_url),
        )

    # -------------------------------------------------------------------------
    # State plumbing
    # -------------------------------------------------------------------------

    def _set_resume(self, resume: ResumeData) -> None:
        self.resume = resume
        self._resume_value.save(resume)

    def _replace_entry(self, section: str, index: int, entry: BaseModel) -> None:
        items = list(getattr(self.resume, section))
        items[index] = entry
        self._set_resume(self.resume.model_copy(update={section: items}))

    def _append_entry(self, section: str, entry: T) -> T:
        items = [*getattr(self.resume, section), entry]
        self._set_resume(self.resume.model_copy(update={section: items}))
        return entry

    def _remove_entry(self, section: str, index: int):
        items = list(getattr(self.resume, section))
        _check_index(items, index, section)
        removed = items.pop(index)
        self._set_resume(self.resume.model_copy(update={section: items}))
        return removed

    # -------------------------------------------------------------------------
    # Update operations
    # -------------------------------------------------------------------------

    def _write_personal_info(self, name: str, value: str) -> PersonalInfo:
        info = self.resume.personal_info.model_copy(update={name: value})
        self._set_resume(self.resume.model_copy(update={"personal_info": info}))
        return info

    def update_personal_info(self, field: str, value: str) -> PersonalInfo:
        """Update one personal info field.

        Editing the summary also commits it against any AI text inserted there.
        """
        name = _resolve_field(PersonalInfo, field, "personal info")
        info = self._write_personal_info(name, value)
        if name == "summary":
            self.commit_field(SUMMARY_FIELD_KEY, value)
        return info

    def update_experience(self, index: int, field: str, value: str) -> WorkExperience:
        """Update one field of an experience entry.

        A concrete end date is ignored while the entry is marked ``Present``;
        use ``set_currently_working`` to clear the flag first.
        """
        _check_index(self.resume.experience, index, "experience")
        name = _resolve_field(WorkExperience, field, "experience")
        entry = self.resume.experience[index]
        if name == "end_date" and entry.is_current and value != PRESENT:
            logger.info("Ignoring end date for current position", entry_id=entry.id)
            return entry
        entry = entry.model_copy(update={name: value})
        self._replace_entry("experience", index, entry)
        return entry

    def set_currently_working(self, index: int, current: bool) -> WorkExperience:
        _check_index(self.resume.experience, index, "experience")
        entry = self.resume.experience[index].model_copy(
            update={"end_date": PRESENT if current else ""}
        )
        self._replace_entry("experience", index, entry)
        return entry

    def update_education(self, index: int, field: str, value: str) -> Education:
        _check_index(self.resume.education, index, "education")
        name = _resolve_field(Education, field, "education")
        entry = self.resume.education[index].model_copy(update={name: value})
        self._replace_entry("education", index, entry)
        return entry

    def update_skill(self, index: int, name: str) -> Skill:
        _check_index(self.resume.skills, index, "skills")
        entry = self.resume.skills[index].model_copy(update={"name": name})
        self._replace_entry("skills", index, entry)
        return entry

    def add_experience(self) -> WorkExperience:
        entry_id = new_entry_id("exp", (e.id for e in self.resume.experience))
        return self._append_entry("experience", WorkExperience(id=entry_id))

    def add_education(self) -> Education:
        entry_id = new_entry_id("edu", (e.id for e in self.resume.education))
        return self._append_entry("education", Education(id=entry_id))

    def add_skill(self, name: str = "") -> Skill:
        entry_id = new_entry_id("skill", (s.id for s in self.resume.skills))
        return self._append_entry("skills", Skill(id=entry_id, name=name))

    def remove_experience(self, index: int) -> WorkExperience:
        return self._remove_entry("experience", index)

    def remove_education(self, index: int) -> Education:
        return self._remove_entry("education", index)

    def remove_skill(self, index: int) -> Skill:
        return self._remove_entry("skills", index)

    def reset(self, data: Optional[ResumeData] = None) -> ResumeData:
        """Replace the resume with the given data, or the built-in sample."""
        resume = (data if data is not None else SAMPLE_RESUME).model_copy(deep=True)
        self._set_resume(resume)
        return resume

    # -------------------------------------------------------------------------
    # Preview
    # -------------------------------------------------------------------------

    def set_template(self, template_id: Union[str, TemplateId, None]) -> TemplateId:
        self.template = resolve_template_id(template_id)
        return self.template

    def preview(self) -> PreviewSurface:
        """Render the current resume with the current template."""
        return self.renderer.render(self.resume, self.template)

    # -------------------------------------------------------------------------
    # AI personalization
    # -------------------------------------------------------------------------

    def commit_field(self, field_key: str, value: str) -> Optional[AIFeedback]:
        """
        Record the user's final text for a field that may hold AI output.

        When the field was filled by the AI and the user changed it, the
        (original, edited) pair is appended to the feedback log.
        """
        original = self._ai_text.get(field_key)
        if not original or original.strip() == value.strip():
            return None

        entry = AIFeedback(original=original, edited=value)
        self.feedback = [*self.feedback, entry]
        self._feedback_value.save(self.feedback)
        self._forget_ai_text(field_key)
        logger.info("Recorded AI feedback", field=field_key, total=len(self.feedback))
        return entry

    def clear_ai_personalization(self) -> None:
        self.feedback = []
        self._feedback_value.save(self.feedback)
        self._ai_text = {}
        self._ai_text_value.save(self._ai_text)

    def _remember_ai_text(self, field_key: str, text: str) -> None:
        self._ai_text = {**self._ai_text, field_key: text}
        self._ai_text_value.save(self._ai_text)

    def _forget_ai_text(self, field_key: str) -> None:
        self._ai_text = {k: v for k, v in self._ai_text.items() if k != field_key}
        self._ai_text_value.save(self._ai_text)

    # -------------------------------------------------------------------------
    # Async actions
    # -------------------------------------------------------------------------

    async def _run_action(self, action: str, work: Callable[[], Awaitable[T]]) -> Optional[T]:
        """Run one export/AI action with the loading flag and error banner."""
        log = logger.bind(action=action)
        if self.is_loading:
            log.info("Another action is in progress, ignoring")
            return None
        self.is_loading = True
        self.error = None
        try:
            return await work()
        except ResumeBuilderError as e:
            log.warning("Action failed", error=e.message)
            self.error = e.message
            return None
        finally:
            self.is_loading = False

    def _export_surface(self, exporter, export_format: str) -> PreviewSurface:
        """Render the preview for an exporter; render failures use its error message."""
        try:
            return self.preview()
        except Exception as e:
            logger.error("Preview render failed", export_format=export_format, error=str(e))
            raise ExportError(exporter.ERROR_MESSAGE, export_format=export_format) from e

    async def export_pdf(self) -> Optional[Path]:
        async def work() -> Path:
            surface = self._export_surface(self.pdf_exporter, "pdf")
            return await asyncio.to_thread(self.pdf_exporter.export, surface, self.output_dir)

        return await self._run_action("export_pdf", work)

    async def export_docx(self) -> Optional[Path]:
        resume = self.resume
        return await self._run_action(
            "export_docx",
            lambda: asyncio.to_thread(self.docx_exporter.export, resume, self.output_dir),
        )

    def export_html(self) -> Optional[Path]:
        try:
            surface = self._export_surface(self.html_exporter, "html")
            return self.html_exporter.export(surface, self.output_dir)
        except ResumeBuilderError as e:
            self.error = e.message
            return None

    def _require_assistant(self) -> AIAssistClient:
        if self.assistant is None:
            raise ConfigurationError("AI assistance is not configured")
        return self.assistant

    async def generate_summary(self) -> Optional[str]:
        """Draft a summary with the AI and insert it into personal info."""
        async def work() -> str:
            summary = await self._require_assistant().generate_summary(
                self.resume, self.feedback
            )
            self._write_personal_info("summary", summary)
            self._remember_ai_text(SUMMARY_FIELD_KEY, summary)
            return summary

        return await self._run_action("generate_summary", work)

    async def analyze_job_match(self, job_description: str) -> Optional[JobMatchResult]:
        if not job_description or not job_description.strip():
            self.error = EMPTY_JOB_DESCRIPTION
            return None

        async def work() -> JobMatchResult:
            self.job_match = None
            self.job_match = await self._require_assistant().analyze_job_match(
                self.resume, job_description
            )
            return self.job_match

        return await self._run_action("analyze_job_match", work)

    async def check_ats_compatibility(self) -> Optional[ATSReport]:
        async def work() -> ATSReport:
            self.ats_report = None
            self.ats_report = await self._require_assistant().check_ats_compatibility(
                self.resume
            )
            return self.ats_report

        return await self._run_action("check_ats_compatibility", work)
