"""
AI Resume Builder

Edit a resume, preview it in one of three templates, export it to PDF, DOCX
or HTML, and get AI help with summaries, job matching and ATS checks.
"""

from .assistant import AIAssistClient
from .config import AppConfig
from .editor import EditorSession
from .models import (
    AIFeedback,
    ATSReport,
    Education,
    JobMatchResult,
    PersonalInfo,
    ResumeData,
    Skill,
    TemplateId,
    WorkExperience,
)
from .renderer import PreviewRenderer, PreviewSurface, render

__version__ = "1.0.0"

__all__ = [
    "AIAssistClient",
    "AppConfig",
    "EditorSession",
    "AIFeedback",
    "ATSReport",
    "Education",
    "JobMatchResult",
    "PersonalInfo",
    "ResumeData",
    "Skill",
    "TemplateId",
    "WorkExperience",
    "PreviewRenderer",
    "PreviewSurface",
    "render",
]
