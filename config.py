"""
Runtime configuration for the Succession Advisor.

Values come from the process environment, optionally seeded from a ``.env``
file in the project root.
"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent / '.env')

# LLM chat collaborator
GEMINI_API_KEY = os.getenv('GEMINI_API_KEY')
ADVISOR_MODEL = os.getenv('ADVISOR_MODEL', 'gemini-2.5-flash')

# HTTP server
API_HOST = os.getenv('ADVISOR_API_HOST', '0.0.0.0')
API_PORT = int(os.getenv('ADVISOR_API_PORT', '8000'))
CORS_ORIGINS = [origin.strip() for origin in os.getenv('CORS_ORIGINS', '*').split(',') if origin.strip()]

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

API_VERSION = "1.0.0"
SERVICE_NAME = "Succession Advisor API"


def configure_logging(level: str = LOG_LEVEL):
    """Install a basic root handler unless the host application already did."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=getattr(logging, level, logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
