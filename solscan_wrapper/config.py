"""
Configuration module: loads environment variables and defines constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# ── API Keys ──────────────────────────────────────────────────────────────────
SOLSCAN_API_KEY: str = os.getenv("SOLSCAN_API_KEY", "")

# ── Solscan API ───────────────────────────────────────────────────────────────
SOLSCAN_BASE_URL: str = "https://pro-api.solscan.io/v1.0"
SOLSCAN_USER_AGENT: str = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/98.0.4758.80 Safari/537.36"
)

# ── Timing ────────────────────────────────────────────────────────────────────
HTTP_TIMEOUT: float = float(os.getenv("SOLSCAN_HTTP_TIMEOUT", "30"))  # seconds

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_FILE: str = "logs/solscan.log"
LOG_ROTATION: str = "10 MB"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
