"""
Creative sidebar template.
"""

from ..models import TemplateId
from .base import BaseTemplate


class CreativeTemplate(BaseTemplate):
    """Sidebar with initials badge, contact, skills and education; experience timeline."""

    template_id = TemplateId.CREATIVE

    def get_template_string(self) -> str:
        """Return Creative Jinja2 template."""
        return """\
<div class="flex w-full min-h-full text-sm resume-content" data-template="creative">
  <div class="w-1/3 bg-slate-200 p-6">
    <div class="text-center">
      <div class="w-24 h-24 rounded-full bg-slate-300 mx-auto mb-4 border-4 border-slate-400 flex items-center justify-center">
        <span class="text-4xl font-bold text-slate-600">{{ personal_info.name | initials }}</span>
      </div>
      <h1 class="text-2xl font-bold">{{ personal_info.name }}</h1>
    </div>
    <div class="mt-8">
      <h2 class="text-sm font-bold uppercase tracking-widest mb-2">Contact</h2>
      <div class="text-xs space-y-1">
        <p>{{ personal_info.phone }}</p>
        <p>{{ personal_info.email }}</p>
        <p>{{ personal_info.website }}</p>
        <p>{{ personal_info.location }}</p>
      </div>
    </div>
    <div class="mt-8">
      <h2 class="text-sm font-bold uppercase tracking-widest mb-2">Skills</h2>
      <ul class="text-xs list-disc list-inside space-y-1">
        {% for skill in skills %}
        <li data-entry-id="{{ skill.id }}">{{ skill.name }}</li>
        {% endfor %}
      </ul>
    </div>
    <div class="mt-8">
      <h2 class="text-sm font-bold uppercase tracking-widest mb-2">Education</h2>
      {% for edu in education %}
      <div class="mb-3 text-xs" data-entry-id="{{ edu.id }}">
        <h3 class="font-semibold">{{ edu.degree }}</h3>
        <p>{{ edu.institution }}</p>
        <p>{{ edu.date_range }}</p>
      </div>
      {% endfor %}
    </div>
  </div>

  <div class="w-2/3 bg-slate-50 p-8">
    <section>
      <h2 class="text-xl font-bold border-b-2 border-slate-300 pb-1 mb-4">Profile</h2>
      <p>{{ personal_info.summary }}</p>
    </section>

    <section class="mt-8">
      <h2 class="text-xl font-bold border-b-2 border-slate-300 pb-1 mb-4">Experience</h2>
      {% for exp in experience %}
      <div class="mb-6 relative pl-5" data-entry-id="{{ exp.id }}">
        <div class="absolute left-0 top-1 w-2 h-2 rounded-full bg-slate-800"></div>
        <div class="absolute left-1 top-1 w-px h-full bg-slate-300"></div>
        <p class="text-xs font-semibold">{{ exp.date_range }}</p>
        <h3 class="text-md font-semibold">{{ exp.job_title }}</h3>
        <p class="text-sm">{{ exp.company }} | {{ exp.location }}</p>
        <ul class="mt-2 list-disc list-inside space-y-1">
          {% for line in exp.achievements %}
          <li class="mb-1">{{ line }}</li>
          {% endfor %}
        </ul>
      </div>
      {% endfor %}
    </section>
  </div>
</div>
"""
