"""
Atomic file writer for generated schemas.

Ensures that an interrupted write never leaves a truncated schema behind.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from .errors import SchemaGenerationError


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def write(self, path: Path, content: str, output_format: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            output_format: "json" or "markdown"
            validate: Whether to validate before finalizing

        Raises:
            SchemaGenerationError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_content(content, output_format)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def write_if_not_exists(self, path: Path, content: str, output_format: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            SchemaGenerationError: If the file already exists or validation fails
        """
        if path.exists():
            raise SchemaGenerationError(f"Output file already exists: {path}. Use --force to overwrite.")

        self.write(path, content, output_format, validate)

    def _validate_content(self, content: str, output_format: str) -> None:
        if output_format == "json":
            try:
                document = json.loads(content)
            except json.JSONDecodeError as e:
                raise SchemaGenerationError(f"Generated schema is not valid JSON: {e}") from e
            if not isinstance(document, dict) or document.get("type") != "object":
                raise SchemaGenerationError("Generated schema is not an object schema")
        elif output_format == "markdown":
            if not content.strip():
                raise SchemaGenerationError("Generated Markdown page is empty")
