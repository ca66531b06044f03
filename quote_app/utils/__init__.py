"""
Utility functions module.

Shared display helpers used by the session coordinator and the HTTP proxy.
"""

from .formatting import format_quote_key, quote_rows

__all__ = ["format_quote_key", "quote_rows"]
