"""
Application configuration and environment variables.
"""
import os
import logging
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.DEBUG),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

# Environment variables
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")

# "memory" keeps the seeded tables in process, "supabase" uses the tables below
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory").lower()
SCHOLARSHIPS_TABLE = os.getenv("SCHOLARSHIPS_TABLE", "scholarships")
UNIVERSITIES_TABLE = os.getenv("UNIVERSITIES_TABLE", "universities")
BOOKMARKS_TABLE = os.getenv("BOOKMARKS_TABLE", "bookmarks")

SUMMARY_MAX_LENGTH = int(os.getenv("SUMMARY_MAX_LENGTH", "150"))

# CORS allowed origins
_DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", ",".join(_DEFAULT_ORIGINS)).split(",")
    if origin.strip()
]

# Log startup configuration
logger.debug("=== STARTUP CONFIGURATION ===")
logger.debug(f"LOG_LEVEL: {LOG_LEVEL}")
logger.debug(f"GEMINI_API_KEY set: {bool(GEMINI_API_KEY)}")
logger.debug(f"GEMINI_MODEL: {GEMINI_MODEL}")
logger.debug(f"STORE_BACKEND: {STORE_BACKEND}")
logger.debug(f"SUPABASE_URL set: {bool(SUPABASE_URL)}")
logger.debug(f"SUPABASE_SERVICE_KEY set: {bool(SUPABASE_SERVICE_KEY)}")
logger.debug(f"ALLOWED_ORIGINS: {ALLOWED_ORIGINS}")
