from __future__ import annotations

"""
Domain Exceptions.

Errors raised when user supplied configuration cannot be interpreted.
Filesystem failures are not wrapped: they surface as the native OSError
raised by the operation that failed.
"""


class ConfigurationError(ValueError):
    """Raised when an option or an environment value cannot be coerced."""
