import os

from dotenv import load_dotenv

load_dotenv()

# Get the project root directory (two levels up from this config file)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Static frontend (images, html) served next to the API
WEB_DIR = os.getenv("SENSEI_WEB_DIR", os.path.join(PROJECT_ROOT, "web"))

# Bundled lesson content
CONTENT_PACKAGE = "sensei.content.lessons"
DEFAULT_LESSON_ID = "1"

# Model configurations
GEMINI_MODEL_NAME = os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash")
TUTOR_TEMPERATURE = float(os.getenv("SENSEI_TUTOR_TEMPERATURE", "0.7"))

# Upper bound for one tutor round trip, in seconds
TUTOR_TIMEOUT_SECONDS = float(os.getenv("SENSEI_TUTOR_TIMEOUT", "20"))

# Server
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("SENSEI_LOG_LEVEL", "INFO").upper()


def get_api_key():
    """Gemini API key, falling back to the generic Google key name."""
    return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
