"""
Runtime configuration, read from the environment.

A ``.env`` file in the working directory is loaded first, real environment
variables win over it.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Tokenizer: must be identical at index and query time
STEMMING = _env_bool("TFIDF_STEMMING", True)

# HTTP server
HOST = os.getenv("TFIDF_HOST", "127.0.0.1")
PORT = int(os.getenv("TFIDF_PORT", "42069"))

# Result truncation (presentation only, the ranker always returns everything)
CLI_TOP_K = int(os.getenv("TFIDF_CLI_TOP_K", "10"))
API_TOP_K = int(os.getenv("TFIDF_API_TOP_K", "20"))

# Logging
LOG_LEVEL = os.getenv("TFIDF_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("TFIDF_LOG_FILE")  # unset: console only

# Only one content type is indexed
SUPPORTED_EXTENSION = ".html"
