"""
AI content assistance: summary drafting, job match analysis and ATS scoring.

Every call is a single attempt. Failures are logged with detail and surfaced
as one generic message per operation.
"""

from typing import Any, Iterable, Optional, Sequence, Type, TypeVar

import structlog
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel

from .config import AppConfig
from .exceptions import AIServiceError, ConfigurationError, InputValidationError
from .models import AIFeedback, ATSReport, JobMatchResult, ResumeData

logger = structlog.get_logger()

SUMMARY_ERROR = "Failed to communicate with the AI model."
ANALYSIS_ERROR = "Failed to analyze resume with the AI model."
ATS_ERROR = "Failed to check ATS compatibility with the AI model."
EMPTY_JOB_DESCRIPTION = "Please paste a job description to analyze."

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def format_feedback(feedback: Sequence[AIFeedback]) -> str:
    """Render past edits of AI text as style examples for the prompt."""
    if not feedback:
        return ""
    examples = "\n---\n".join(
        f'AI-Generated:\n"{f.original}"\nUser-Edited:\n"{f.edited}"' for f in feedback
    )
    return (
        "\n\nTo better match the user's preferred style, learn from these examples "
        f"of their previous edits:\n{examples}"
    )


def job_match_resume_text(data: ResumeData) -> str:
    """Resume projection used for job description analysis."""
    experience = "\n".join(f"{e.job_title}: {e.description}" for e in data.experience)
    skills = ", ".join(s.name for s in data.skills)
    return (
        f"Summary: {data.personal_info.summary}\n"
        f"Experience: {experience}\n"
        f"Skills: {skills}"
    )


def ats_resume_text(data: ResumeData) -> str:
    """Fuller resume projection used for the ATS check."""
    lines = []
    for e in data.experience:
        description = e.description.replace("\n", " ")
        lines.append(f"- {e.job_title} at {e.company}: {description}")
    experience = "\n".join(lines)
    education = "\n".join(f"- {e.degree} from {e.institution}" for e in data.education)
    skills = ", ".join(s.name for s in data.skills)
    return (
        f"Name: {data.personal_info.name}\n"
        f"Summary: {data.personal_info.summary}\n\n"
        f"Experience:\n{experience}\n\n"
        f"Education:\n{education}\n\n"
        f"Skills:\n{skills}"
    )


def _message_text(message: Any) -> str:
    """Extract plain text from a chat model reply."""
    content = getattr(message, "content", message)
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content or "")


class AIAssistClient:
    """Request/response bridge to the hosted text-generation model."""

    def __init__(self, config: Optional[AppConfig] = None, llm: Optional[BaseChatModel] = None):
        """
        Args:
            config: Application config; used to build the Gemini chat model
            llm: Pre-built chat model (takes precedence over config)
        """
        if llm is None:
            if config is None:
                raise ConfigurationError("AIAssistClient needs a config or a chat model")
            llm = ChatGoogleGenerativeAI(
                model=config.model,
                google_api_key=config.google_api_key,
                temperature=config.temperature,
                max_retries=0,
            )
        self.llm = llm
        self._setup_prompts()

    def _setup_prompts(self):
        """Initialize the three request prompts."""
        self.summary_prompt = ChatPromptTemplate.from_messages([
            ("system",
             "Act as a professional resume writer. Based on the following career "
             "details, write a concise, impactful, and ATS-friendly professional "
             "summary of 2-4 sentences. Return only the summary text."),
            ("user",
             "Work Experience:\n{experience}\n\nSkills:\n{skills}{feedback}")
        ])

        self.job_match_prompt = ChatPromptTemplate.from_messages([
            ("system",
             "Act as an expert career coach and ATS analyst. Analyze the following "
             "resume against the provided job description. Provide a match score "
             "from 1-100, a brief analysis explaining the score, and 3 concrete, "
             "actionable suggestions for improvement."),
            ("user",
             "Resume Text:\n---\n{resume_text}\n---\n\n"
             "Job Description:\n---\n{job_description}\n---")
        ])

        self.ats_prompt = ChatPromptTemplate.from_messages([
            ("system",
             "Act as an advanced Applicant Tracking System (ATS) simulator and expert "
             "resume reviewer. Analyze the following resume for ATS compatibility and "
             "overall effectiveness. Evaluate it on key criteria such as keyword "
             "optimization (for general roles related to the experience), formatting, "
             "clarity, and use of action verbs. Provide a compatibility score from "
             "1-100, a brief analysis explaining the score, and 3-5 concrete, "
             "actionable suggestions for improvement. The suggestions should be "
             "specific and easy to implement."),
            ("user", "Resume Text:\n---\n{resume_text}\n---")
        ])

    async def generate_summary(
        self, data: ResumeData, feedback: Iterable[AIFeedback] = ()
    ) -> str:
        """
        Draft a professional summary from titles, companies and skills.

        Args:
            data: Resume data
            feedback: Previous edits of AI text, used as style examples

        Returns:
            Summary text

        Raises:
            AIServiceError: On any model failure or an empty reply
        """
        log = logger.bind(operation="generate_summary")
        messages = self.summary_prompt.format_messages(
            experience="\n".join(f"- {e.job_title} at {e.company}" for e in data.experience),
            skills=", ".join(s.name for s in data.skills),
            feedback=format_feedback(list(feedback)),
        )
        try:
            response = await self.llm.ainvoke(messages)
            summary = _message_text(response).strip()
            if not summary:
                raise ValueError("Model returned an empty summary")
        except Exception as e:
            log.error("Error generating summary", error=str(e))
            raise AIServiceError(SUMMARY_ERROR) from e

        log.info("Summary generated", length=len(summary))
        return summary

    async def analyze_job_match(self, data: ResumeData, job_description: str) -> JobMatchResult:
        """
        Score the resume against a job description.

        Raises:
            InputValidationError: If the job description is empty (no request is made)
            AIServiceError: On any model failure or a reply that does not fit the schema
        """
        if not job_description or not job_description.strip():
            raise InputValidationError(EMPTY_JOB_DESCRIPTION)

        messages = self.job_match_prompt.format_messages(
            resume_text=job_match_resume_text(data),
            job_description=job_description,
        )
        return await self._structured_call(
            "analyze_job_match", messages, JobMatchResult, ANALYSIS_ERROR
        )

    async def check_ats_compatibility(self, data: ResumeData) -> ATSReport:
        """
        Score the resume for ATS compatibility.

        Raises:
            AIServiceError: On any model failure or a reply that does not fit the schema
        """
        messages = self.ats_prompt.format_messages(resume_text=ats_resume_text(data))
        return await self._structured_call(
            "check_ats_compatibility", messages, ATSReport, ATS_ERROR
        )

    async def _structured_call(
        self, operation: str, messages, schema: Type[SchemaT], error_message: str
    ) -> SchemaT:
        """Invoke the model with a declared output schema and validate the reply strictly."""
        log = logger.bind(operation=operation)
        try:
            structured_llm = self.llm.with_structured_output(schema)
            result = await structured_llm.ainvoke(messages)
            if result is None:
                raise ValueError("Model reply did not match the schema")
            if not isinstance(result, schema):
                result = schema.model_validate(result)
        except Exception as e:
            log.error("Structured model call failed", error=str(e))
            raise AIServiceError(error_message) from e

        log.info("Structured model call succeeded", score=result.score)
        return result
