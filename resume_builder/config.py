"""
Configuration management for the resume builder.
All settings are read from the environment (and an optional .env file).
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .models import TemplateId


class AppConfig:
    """Central configuration for the resume builder - all settings from .env."""

    DEFAULT_MODEL = "gemini-2.5-flash"
    DEFAULT_STYLESHEET_URL = "https://cdn.tailwindcss.com"

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration from environment variables.

        Args:
            env_file: Optional path to a .env file (defaults to ./.env)

        Raises:
            ConfigurationError: If GOOGLE_API_KEY is missing or a value is invalid
        """
        load_dotenv(env_file)

        # API Configuration
        self.google_api_key = os.getenv("GOOGLE_API_KEY")
        if not self.google_api_key:
            raise ConfigurationError("GOOGLE_API_KEY environment variable is not set")

        # Model configuration
        self.model = os.getenv("MODEL", self.DEFAULT_MODEL)
        self.temperature = self._float("MODEL_TEMPERATURE", "0.7")

        # Paths
        self.storage_dir = Path(
            os.getenv("STORAGE_DIR", str(Path.home() / ".resume_builder"))
        ).expanduser()
        self.output_dir = Path(os.getenv("OUTPUT_DIR", "./output")).expanduser()

        # Template configuration
        template = os.getenv("DEFAULT_TEMPLATE", TemplateId.MODERN.value).lower()
        try:
            self.default_template = TemplateId(template)
        except ValueError:
            raise ConfigurationError(
                f"Unknown template: {template}. "
                f"Use one of: {', '.join(t.value for t in TemplateId)}"
            )

        # Export settings
        self.pdf_scale = self._float("PDF_SCALE", "2")
        self.preview_width_px = self._int("PREVIEW_WIDTH_PX", "816")
        self.html_stylesheet_url = os.getenv(
            "HTML_STYLESHEET_URL", self.DEFAULT_STYLESHEET_URL
        )
        if self.pdf_scale <= 0 or self.preview_width_px <= 0:
            raise ConfigurationError("PDF_SCALE and PREVIEW_WIDTH_PX must be positive")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "console").lower()

    @staticmethod
    def _float(name: str, default: str) -> float:
        raw = os.getenv(name, default)
        try:
            return float(raw)
        except ValueError:
            raise ConfigurationError(f"{name} must be a number, got {raw!r}")

    @staticmethod
    def _int(name: str, default: str) -> int:
        raw = os.getenv(name, default)
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer, got {raw!r}")

    def print_config_summary(self):
        """Print configuration summary for debugging."""
        print("\n" + "=" * 80)
        print("RESUME BUILDER CONFIGURATION")
        print("=" * 80)
        print(f"Model: {self.model} (temperature {self.temperature})")
        print(f"Default Template: {self.default_template.value}")
        print(f"Storage Directory: {self.storage_dir}")
        print(f"Output Directory: {self.output_dir}")
        print(f"PDF Scale: {self.pdf_scale} | Preview Width: {self.preview_width_px}px")
        print(f"HTML Stylesheet: {self.html_stylesheet_url}")
        print("=" * 80 + "\n")
