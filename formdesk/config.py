"""Runtime configuration defaults for persistence, logging and submission."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("FORMDESK_DB_PATH", "data/formdesk.db")
DEBUG_LOG_PATH = os.environ.get("FORMDESK_DEBUG_LOG", "/tmp/formdesk-debug.log")

# Mock transport latency, matching the web prototype.
SUBMIT_DELAY_SECONDS = float(os.environ.get("FORMDESK_SUBMIT_DELAY", "0.8"))

REGISTRATION_STORAGE_KEY = "registrationForm"
ORDER_STORAGE_KEY = "pizzaOrder"

CURRENCY_SYMBOL = "₹"
