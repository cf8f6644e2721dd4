"""
Base template class for HTML preview generation.
"""

from abc import ABC, abstractmethod

import jinja2

from ..models import ResumeData, initials, join_skills


class BaseTemplate(ABC):
    """Abstract base class for resume templates."""

    template_id = None

    def __init__(self):
        self.env = self._create_jinja_env()
        self.env.filters["join_skills"] = join_skills
        self.env.filters["initials"] = initials
        self._template = None

    def _create_jinja_env(self) -> jinja2.Environment:
        """Create Jinja2 environment with HTML autoescaping."""
        return jinja2.Environment(
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=jinja2.StrictUndefined,
        )

    @abstractmethod
    def get_template_string(self) -> str:
        """Return the Jinja2 template string."""
        pass

    def render(self, data: ResumeData) -> str:
        """
        Render the template with resume data.

        Args:
            data: Resume data

        Returns:
            HTML fragment for the scrollable preview content
        """
        if self._template is None:
            self._template = self.env.from_string(self.get_template_string())
        return self._template.render(
            personal_info=data.personal_info,
            experience=data.experience,
            education=data.education,
            skills=data.skills,
        )
