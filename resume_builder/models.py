"""
Data models for the resume builder.

ResumeData is the single source of truth: templates, exporters and the AI
assistant all read from it, and it is the only state written to storage.
Serialized form uses camelCase keys (``personalInfo``, ``jobTitle``, ...).
"""

import re
import time
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PRESENT = "Present"
SKILL_DELIMITER = " | "


class TemplateId(str, Enum):
    """Visual layouts available for the preview."""

    CLASSIC = "classic"
    MODERN = "modern"
    CREATIVE = "creative"


DEFAULT_TEMPLATE = TemplateId.MODERN


class ResumeModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


class PersonalInfo(ResumeModel):
    """Contact details and summary; one per resume."""

    name: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    location: str = ""
    summary: str = ""

    @property
    def contact_line(self) -> str:
        return " | ".join([self.location, self.phone, self.email, self.website])


class WorkExperience(ResumeModel):
    """Work experience entry. ``end_date`` may be the ``Present`` sentinel."""

    id: str
    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""

    @property
    def is_current(self) -> bool:
        return self.end_date == PRESENT

    @property
    def date_range(self) -> str:
        end = PRESENT if self.is_current else self.end_date
        return f"{self.start_date} - {end}"

    @property
    def achievements(self) -> List[str]:
        return description_lines(self.description)


class Education(ResumeModel):
    """Education entry."""

    id: str
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""

    @property
    def date_range(self) -> str:
        return f"{self.start_date} - {self.end_date}"


class Skill(ResumeModel):
    """A single skill name."""

    id: str
    name: str = ""


class ResumeData(ResumeModel):
    """Aggregate root for everything shown on the resume."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)

    def to_storage_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class AIFeedback(ResumeModel):
    """A user's edit of text the AI inserted."""

    original: str
    edited: str


class JobMatchResult(BaseModel):
    """Structured reply for job description analysis."""

    score: int = Field(
        ...,
        ge=1,
        le=100,
        description="A match score between 1 and 100 representing how well "
        "the resume matches the job description.",
    )
    analysis: str = Field(
        ..., description="A brief analysis explaining the reasoning behind the score."
    )
    suggestions: List[str] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="An array of 3 actionable suggestions for improving the resume.",
    )


class ATSReport(BaseModel):
    """Structured reply for the ATS compatibility check."""

    score: int = Field(
        ..., ge=1, le=100, description="An ATS compatibility score between 1 and 100."
    )
    analysis: str = Field(
        ...,
        description="A brief analysis explaining the reasoning behind the score, "
        "highlighting strengths and weaknesses.",
    )
    suggestions: List[str] = Field(
        ...,
        min_length=3,
        max_length=5,
        description="An array of 3-5 actionable suggestions for improving the "
        "resume's ATS compatibility.",
    )


# --- Pure helpers shared by templates and exporters ---


def description_lines(description: str) -> List[str]:
    """
    Split a description into achievement lines.

    Blank lines are dropped; one leading dash marker and the surrounding
    whitespace are stripped from each remaining line.
    """
    lines = []
    for line in (description or "").split("\n"):
        if not line.strip():
            continue
        lines.append(re.sub(r"^-", "", line).strip())
    return lines


def join_skills(skills: Iterable[Skill]) -> str:
    """Join skill names with the fixed delimiter; empty input gives ``""``."""
    return SKILL_DELIMITER.join(skill.name for skill in skills)


def initials(name: str) -> str:
    """Initials for the creative template's badge."""
    words = (name or "").split()
    if not words:
        return ""
    if len(words) == 1:
        return words[0][0].upper()
    return (words[0][0] + words[-1][0]).upper()


def new_entry_id(prefix: str, existing: Iterable[str], now_ms: Optional[int] = None) -> str:
    """
    Create a list entry id of the form ``{prefix}{epoch millis}``.

    The numeric part is bumped until the id is unused in ``existing``.
    """
    taken = set(existing)
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    candidate = f"{prefix}{stamp}"
    while candidate in taken:
        stamp += 1
        candidate = f"{prefix}{stamp}"
    return candidate


SAMPLE_RESUME = ResumeData(
    personal_info=PersonalInfo(
        name="Jane Doe",
        email="jane.doe@example.com",
        phone="123-456-7890",
        website="janedoe.dev",
        location="San Francisco, CA",
        summary=(
            "Innovative and deadline-driven Software Engineer with 5+ years of "
            "experience designing and developing user-centered digital products "
            "from initial concept to final, polished deliverable."
        ),
    ),
    experience=[
        WorkExperience(
            id="exp1",
            job_title="Senior Software Engineer",
            company="Tech Solutions Inc.",
            location="Palo Alto, CA",
            start_date="2021-08",
            end_date=PRESENT,
            description=(
                "- Led a team of 5 engineers in developing a new cloud-based SaaS "
                "platform, resulting in a 20% increase in user engagement.\n"
                "- Architected and implemented a scalable microservices architecture "
                "using Node.js and Docker, improving system reliability by 30%.\n"
                "- Optimized application performance, reducing page load times by 40% "
                "through code splitting and lazy loading techniques."
            ),
        ),
        WorkExperience(
            id="exp2",
            job_title="Software Engineer",
            company="Digital Innovations",
            location="San Jose, CA",
            start_date="2018-06",
            end_date="2021-07",
            description=(
                "- Developed and maintained front-end features for a high-traffic "
                "e-commerce website using React and Redux.\n"
                "- Collaborated with cross-functional teams to define, design, and "
                "ship new features.\n"
                "- Wrote and maintained comprehensive unit and integration tests, "
                "ensuring code quality and stability."
            ),
        ),
    ],
    education=[
        Education(
            id="edu1",
            institution="State University",
            degree="Master of Science",
            field_of_study="Computer Science",
            start_date="2016-09",
            end_date="2018-05",
        ),
        Education(
            id="edu2",
            institution="University of California",
            degree="Bachelor of Science",
            field_of_study="Computer Engineering",
            start_date="2012-09",
            end_date="2016-05",
        ),
    ],
    skills=[
        Skill(id="skill1", name="JavaScript (ES6+)"),
        Skill(id="skill2", name="TypeScript"),
        Skill(id="skill3", name="React"),
        Skill(id="skill4", name="Node.js"),
        Skill(id="skill5", name="Python"),
        Skill(id="skill6", name="SQL & NoSQL"),
        Skill(id="skill7", name="Docker"),
        Skill(id="skill8", name="AWS"),
    ],
)
