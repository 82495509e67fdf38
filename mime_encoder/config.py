"""Configuration defaults and .env loading.

WHY: A few encoder behaviours are deployment choices rather than code
choices: whether a header/body framing mismatch is tolerated, how
generated boundaries are prefixed, and how chatty the CLI is. Keeping
them here as plain module-level values makes them easy to find and to
override per environment.

HOW: python-dotenv loads the .env file on import. Each constant reads
its environment variable with a default.

RULES:
- MIME_ENCODER_STRICT: "true" turns framing mismatches into errors
- MIME_BOUNDARY_PREFIX: prepended to generated boundary tokens
- MIME_LOG_LEVEL: logging level name used by the CLI
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Encoder behaviour
# ---------------------------------------------------------------------------

STRICT_SHAPE_CHECK = os.getenv("MIME_ENCODER_STRICT", "false").lower() == "true"
"""Reject bodies whose shape disagrees with the header's boundary declaration."""

BOUNDARY_PREFIX = os.getenv("MIME_BOUNDARY_PREFIX", "")

# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("MIME_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
