"""Configuration management for the FitPlan service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
CORS_ORIGINS: Final[list[str]] = [
    o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()
]

# AI provider (credentials are read per request in infra.ai_providers)
AI_PROVIDER: Final[str] = os.getenv('AI_PROVIDER', 'gemini').strip().lower()
GEMINI_MODEL: Final[str] = os.getenv('GEMINI_MODEL', 'gemini-2.5-pro')
GEMINI_API_BASE: Final[str] = os.getenv(
    'GEMINI_API_BASE', 'https://generativelanguage.googleapis.com/v1beta'
)
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')

# Nutrition lookup
EDAMAM_API_BASE: Final[str] = os.getenv('EDAMAM_API_BASE', 'https://api.edamam.com/api')

HTTP_TIMEOUT_SECONDS: Final[float] = float(os.getenv('HTTP_TIMEOUT_SECONDS', '60'))

# Plan view
DEFAULT_DAYS_PER_WEEK: Final[int] = int(os.getenv('DEFAULT_DAYS_PER_WEEK', '5'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data'))).resolve()
