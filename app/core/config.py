# app/core/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------
# KEY-VALUE NAMESPACE
# ---------------------------------------------------

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# "redis" in production, "memory" for local development without a server
KV_BACKEND = os.getenv("KV_BACKEND", "redis").lower()

# Every record key is "<KV_NAMESPACE><YYYY-MM-DD>"
KV_NAMESPACE = os.getenv("KV_NAMESPACE", "assignments:")

# Upper bound on keys returned by one listing call
KV_LIST_PAGE_SIZE = int(os.getenv("KV_LIST_PAGE_SIZE", "1000"))

# ---------------------------------------------------
# API DEFAULTS
# ---------------------------------------------------

LIST_DEFAULT_LIMIT = int(os.getenv("LIST_DEFAULT_LIMIT", "50"))

# ---------------------------------------------------
# LOGGING
# ---------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE")
