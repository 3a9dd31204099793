import os

from dotenv import load_dotenv

load_dotenv()

__version__ = "0.2.0"

# Remote dictionary lookups (Jisho.org word search)
JISHO_API_URL = os.getenv("ROMAKANA_JISHO_API_URL", "https://jisho.org/api/v1/search/words")
MIN_REQUEST_INTERVAL_MS = int(os.getenv("ROMAKANA_MIN_REQUEST_INTERVAL_MS", "100"))
REQUEST_TIMEOUT_SEC = float(os.getenv("ROMAKANA_REQUEST_TIMEOUT_SEC", "10"))

# In-memory translation cache (cleared on process restart)
CACHE_MAX_SIZE = int(os.getenv("ROMAKANA_CACHE_MAX_SIZE", "200"))
