"""
Errors raised while generating or writing schemas.
"""

from __future__ import annotations


class SchemaGenerationError(Exception):
    """Raised when a schema cannot be produced or written.

    This can happen when:
    - The target string is not of the form ``module:ClassName``
    - The target attribute is missing or is not a class
    - The output file already exists and overwriting was not requested
    - The serialized output fails validation before being written
    """

    pass
