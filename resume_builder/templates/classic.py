"""
Classic single-column template.
"""

from ..models import TemplateId
from .base import BaseTemplate


class ClassicTemplate(BaseTemplate):
    """Centered header, uppercase section rules, pipe-separated skills."""

    template_id = TemplateId.CLASSIC

    def get_template_string(self) -> str:
        """Return Classic Jinja2 template."""
        return """\
<div class="p-8 bg-white w-full min-h-full text-sm resume-content" data-template="classic">
  <div class="text-center border-b-2 border-gray-400 pb-4">
    <h1 class="text-4xl font-bold tracking-wider">{{ personal_info.name }}</h1>
    <p class="mt-2">{{ personal_info.contact_line }}</p>
  </div>

  <div class="mt-6">
    <h2 class="text-lg font-bold tracking-widest border-b border-gray-300 pb-1 mb-2">SUMMARY</h2>
    <p>{{ personal_info.summary }}</p>
  </div>

  <div class="mt-6">
    <h2 class="text-lg font-bold tracking-widest border-b border-gray-300 pb-1 mb-2">EXPERIENCE</h2>
    {% for exp in experience %}
    <div class="mb-4" data-entry-id="{{ exp.id }}">
      <div class="flex justify-between items-baseline">
        <h3 class="text-md font-bold">{{ exp.job_title }}</h3>
        <p class="text-xs font-medium">{{ exp.date_range }}</p>
      </div>
      <p class="italic">{{ exp.company }}, {{ exp.location }}</p>
      <div class="mt-1 pl-4">
        {% for line in exp.description.split('\\n') %}
        <p class="mb-1">{{ line }}</p>
        {% endfor %}
      </div>
    </div>
    {% endfor %}
  </div>

  <div class="mt-6">
    <h2 class="text-lg font-bold tracking-widest border-b border-gray-300 pb-1 mb-2">EDUCATION</h2>
    {% for edu in education %}
    <div class="mb-3" data-entry-id="{{ edu.id }}">
      <div class="flex justify-between items-baseline">
        <h3 class="text-md font-bold">{{ edu.institution }}</h3>
        <p class="text-xs font-medium">{{ edu.date_range }}</p>
      </div>
      <p>{{ edu.degree }} in {{ edu.field_of_study }}</p>
    </div>
    {% endfor %}
  </div>

  <div class="mt-6">
    <h2 class="text-lg font-bold tracking-widest border-b border-gray-300 pb-1 mb-2">SKILLS</h2>
    <p class="skill-line">{{ skills | join_skills }}</p>
  </div>
</div>
"""
