"""
Logging infrastructure.

Re-exports the primary helper so callers can simply do
``from medminder.infrastructure.logging import get_logger``.
"""

from .logger import StructuredJSONFormatter, get_logger  # noqa: F401  (re-export)
