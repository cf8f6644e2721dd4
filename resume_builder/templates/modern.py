"""
Modern two-column template (the default).
"""

from ..models import TemplateId
from .base import BaseTemplate


class ModernTemplate(BaseTemplate):
    """Header with contact block, experience column and skills/education side column."""

    template_id = TemplateId.MODERN

    def get_template_string(self) -> str:
        """Return Modern Jinja2 template."""
        return """\
<div class="p-8 bg-white w-full min-h-full text-sm resume-content" data-template="modern">
  <header class="flex items-center justify-between border-b-2 border-black pb-4">
    <div>
      <h1 class="text-4xl font-bold text-black">{{ personal_info.name }}</h1>
      <p class="text-lg mt-1">Professional Summary</p>
    </div>
    <div class="text-right text-xs">
      <p>{{ personal_info.location }}</p>
      <p>{{ personal_info.phone }}</p>
      <p>{{ personal_info.email }}</p>
      <p>{{ personal_info.website }}</p>
    </div>
  </header>

  <div class="mt-6">
    <p>{{ personal_info.summary }}</p>
  </div>

  <div class="grid grid-cols-3 gap-8 mt-8">
    <div class="col-span-2">
      <h2 class="text-xl font-bold text-black border-b border-gray-300 pb-1 mb-4">Work Experience</h2>
      {% for exp in experience %}
      <div class="mb-6" data-entry-id="{{ exp.id }}">
        <div class="flex justify-between items-baseline">
          <h3 class="text-md font-semibold">{{ exp.job_title }}</h3>
          <p class="text-xs font-medium">{{ exp.date_range }}</p>
        </div>
        <p class="text-sm">{{ exp.company }} | {{ exp.location }}</p>
        <ul class="mt-2 list-disc list-inside space-y-1">
          {% for line in exp.achievements %}
          <li class="mb-1">{{ line }}</li>
          {% endfor %}
        </ul>
      </div>
      {% endfor %}
    </div>

    <div class="col-span-1">
      <h2 class="text-xl font-bold text-black border-b border-gray-300 pb-1 mb-4">Skills</h2>
      <div class="flex flex-wrap gap-2">
        {% for skill in skills %}
        <span class="bg-gray-200 text-black text-xs font-medium px-2 py-0 rounded-full" data-entry-id="{{ skill.id }}">{{ skill.name }}</span>
        {% endfor %}
      </div>

      <h2 class="text-xl font-bold text-black border-b border-gray-300 pb-1 mb-4 mt-8">Education</h2>
      {% for edu in education %}
      <div class="mb-4" data-entry-id="{{ edu.id }}">
        <h3 class="text-md font-semibold">{{ edu.institution }}</h3>
        <p class="text-sm">{{ edu.degree }}</p>
        <p class="text-xs">{{ edu.field_of_study }}</p>
        <p class="text-xs">{{ edu.date_range }}</p>
      </div>
      {% endfor %}
    </div>
  </div>
</div>
"""
