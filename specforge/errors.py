# FILE: specforge/errors.py
"""
Error taxonomy for SpecForge.

HTTP mapping (done in the routers, not here):
- ValidationError        -> 400
- InvalidMoveError       -> 400
- NotFoundError          -> 404
- CreationError          -> 500 (generic message)
- GenerationError        -> 500 (generic message)
- GenerationFormatError  -> 500 (generic message)
"""


class SpecForgeError(Exception):
    """Base class for SpecForge errors."""


class ValidationError(SpecForgeError):
    """Caller input is missing or malformed."""


class NotFoundError(SpecForgeError):
    """Requested entity does not exist."""


class InvalidMoveError(SpecForgeError):
    """Task is already first (moving up) or last (moving down)."""


class CreationError(SpecForgeError):
    """Persisting a generated spec failed after a successful generation."""


class GenerationError(SpecForgeError):
    """The language-model call failed (transport, API status, or format)."""


class GenerationFormatError(GenerationError):
    """Model output was not parseable JSON or did not match the spec schema."""
