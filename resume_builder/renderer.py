"""
Preview rendering with template selection.
"""

from dataclasses import dataclass
from typing import Optional, Union

import structlog

from .models import DEFAULT_TEMPLATE, ResumeData, TemplateId
from .templates import TEMPLATES

logger = structlog.get_logger()

DEFAULT_PREVIEW_WIDTH_PX = 816
PAGE_ASPECT = 11 / 8.5


@dataclass(frozen=True)
class PreviewSurface:
    """
    Handle to a rendered preview, passed to the PDF and HTML exporters.

    ``content_html`` is the scrollable content; ``html`` is the preview
    container around it, which is what the user sees and what gets exported.
    """

    template_id: TemplateId
    content_html: str
    html: str
    width_px: int = DEFAULT_PREVIEW_WIDTH_PX

    @property
    def min_height_px(self) -> float:
        """Height of the letter-shaped viewport at this width."""
        return self.width_px * PAGE_ASPECT


def resolve_template_id(template_id: Optional[Union[str, TemplateId]]) -> TemplateId:
    """Map a template identifier to a known template, falling back to the default."""
    if isinstance(template_id, TemplateId):
        return template_id
    try:
        return TemplateId(str(template_id).lower())
    except ValueError:
        logger.warning(
            "Unknown template, using default",
            template=template_id,
            default=DEFAULT_TEMPLATE.value,
        )
        return DEFAULT_TEMPLATE


class PreviewRenderer:
    """Renders resume data into a preview surface."""

    def __init__(self, width_px: int = DEFAULT_PREVIEW_WIDTH_PX):
        self.width_px = width_px
        self._templates = {}

    def _load_template(self, template_id: TemplateId):
        """Load (and cache) the template instance."""
        if template_id not in self._templates:
            self._templates[template_id] = TEMPLATES[template_id]()
        return self._templates[template_id]

    def render(
        self, data: ResumeData, template_id: Optional[Union[str, TemplateId]] = None
    ) -> PreviewSurface:
        """
        Render resume data with the chosen template.

        Args:
            data: Resume data
            template_id: Template identifier; unknown or missing values use the default

        Returns:
            PreviewSurface holding the rendered markup
        """
        resolved = resolve_template_id(template_id)
        content = self._load_template(resolved).render(data)
        html = (
            '<div class="resume-preview w-full aspect-[8.5/11] overflow-y-auto">\n'
            f"{content}</div>\n"
        )
        return PreviewSurface(
            template_id=resolved,
            content_html=content,
            html=html,
            width_px=self.width_px,
        )


_default_renderer = PreviewRenderer()


def render(
    data: ResumeData, template_id: Optional[Union[str, TemplateId]] = None
) -> PreviewSurface:
    """Render with a shared default-width renderer."""
    return _default_renderer.render(data, template_id)
