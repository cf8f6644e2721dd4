"""
HTML preview template implementations.
"""

from .base import BaseTemplate
from .classic import ClassicTemplate
from .modern import ModernTemplate
from .creative import CreativeTemplate

__all__ = ["BaseTemplate", "ClassicTemplate", "ModernTemplate", "CreativeTemplate"]
TEMPLATES = {
    cls.template_id: cls for cls in (ClassicTemplate, ModernTemplate, CreativeTemplate)
}
