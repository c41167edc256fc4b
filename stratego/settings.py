from __future__ import annotations

import os

REVEAL_DELAY_MS = int(os.getenv("STRATEGO_REVEAL_DELAY_MS", "500"))
MIN_COLUMNS = int(os.getenv("STRATEGO_MIN_COLUMNS", "32"))
MIN_ROWS = int(os.getenv("STRATEGO_MIN_ROWS", "12"))
LOG_LEVEL = os.getenv("STRATEGO_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("STRATEGO_LOG_FILE") or None
SEED = int(os.environ["STRATEGO_SEED"]) if os.getenv("STRATEGO_SEED") else None
