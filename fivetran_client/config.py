"""Shared client constants.

This module centralizes URLs, header names, environment variable names and
retry defaults so the transport, retry and webhook layers stay small and
focused.
"""

from __future__ import annotations

DEFAULT_BASE_URL = "https://api.fivetran.com/v1"
DEFAULT_TIMEOUT = 30.0

# Environment variables read by FivetranClient.from_env()
ENV_API_KEY = "FIVETRAN_API_KEY"
ENV_API_SECRET = "FIVETRAN_API_SECRET"
ENV_BASE_URL = "FIVETRAN_BASE_URL"

# Retry defaults (milliseconds)
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY_MS = 1_000
DEFAULT_MAX_DELAY_MS = 30_000

# Webhooks
SIGNATURE_HEADER = "x-fivetran-signature-256"
RETRY_AFTER_HEADER = "Retry-After"
