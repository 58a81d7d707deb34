import logging
import os
from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
REASONING_MODEL = os.getenv("OPENAI_REASONING_MODEL", "gpt-5")
SUMMARY_MODEL = os.getenv("OPENAI_SUMMARY_MODEL", "gpt-4.1")
SEARCH_MODEL = os.getenv("OPENAI_SEARCH_MODEL", REASONING_MODEL)
OPENAI_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "90"))
USE_OPENAI_WEB_SEARCH = os.getenv("USE_OPENAI_WEB_SEARCH", "true").lower() == "true"
ENABLE_VERIFICATION = os.getenv("ENABLE_VERIFICATION", "true").lower() == "true"
NEWS_LOOKBACK_HOURS = int(os.getenv("NEWS_LOOKBACK_HOURS", "48"))
TOP_NEWS_COUNT = int(os.getenv("TOP_NEWS_COUNT", "5"))
PREFERRED_NEWS_SOURCES = [
    s.strip()
    for s in os.getenv(
        "PREFERRED_NEWS_SOURCES",
        "Bloomberg,Reuters,Financial Times (FT),Wall Street Journal (WSJ)",
    ).split(",")
    if s.strip()
]

# Requests fail at call time without a key; the UI should still come up.
if not OPENAI_API_KEY:
    logging.getLogger("macrodesk.config").error("OPENAI_API_KEY environment variable not set.")

LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_FILE_NAME = os.getenv("LOG_FILE_NAME", "macrodesk.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", "2000000"))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))
