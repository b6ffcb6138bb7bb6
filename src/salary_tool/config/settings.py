"""
Centralized settings for the salary tool.

Values come from SALARY_* environment variables with sensible defaults.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # HTTP server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: tuple = ("*",)

    # Streamlit page
    ui_port: int = 8501

    # Logging
    log_level: str = "INFO"

    @property
    def src_path(self) -> Path:
        return self.project_root / 'src'

    @property
    def ui_script(self) -> Path:
        return self.src_path / 'salary_tool' / 'ui' / 'app_streamlit.py'

    @classmethod
    def load(cls, project_root: Optional[Path] = None, environ: Optional[dict] = None) -> 'Settings':
        """Load settings from the environment."""
        env = os.environ if environ is None else environ
        root = project_root or get_project_root()

        origins = tuple(
            o.strip() for o in env.get('SALARY_CORS_ORIGINS', '*').split(',') if o.strip()
        )

        return cls(
            project_root=root,
            api_host=env.get('SALARY_API_HOST', '0.0.0.0'),
            api_port=int(env.get('SALARY_API_PORT', '8000')),
            cors_origins=origins or ('*',),
            ui_port=int(env.get('SALARY_UI_PORT', '8501')),
            log_level=env.get('SALARY_LOG_LEVEL', 'INFO').upper(),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
