"""Pydantic model for the options of one justification run.

WHY: Width and encoding arrive from three places (environment, CLI flags,
library callers) and must be validated the same way before any text is
touched. A pydantic model gives typed, self-describing options and a single
validation step.

HOW: JustifyOptions runs config.validate_width() and codecs.lookup() as
field validators. JustifyOptions.build() fills unset values from config and
converts pydantic's ValidationError into the project's ConfigurationError.

RULES:
- Width bounds live in config.validate_width() only
- None means "use the configured default"
- Callers see ConfigurationError, never pydantic.ValidationError
"""

from __future__ import annotations

import codecs
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from text_justifier.config import DEFAULT_ENCODING, load_default_width, validate_width
from text_justifier.errors import ConfigurationError


class JustifyOptions(BaseModel):
    """Validated options for one justification run."""

    width: int = Field(description="Target justified line width in characters.")
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        description="Text encoding used to read the input and write the output.",
    )

    model_config = {"frozen": True}

    @field_validator("width")
    @classmethod
    def _width_in_range(cls, value: int) -> int:
        return validate_width(value)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError:
            raise ValueError("Unknown encoding '{}'.".format(value)) from None

    @classmethod
    def build(
        cls,
        width: Optional[int] = None,
        encoding: Optional[str] = None,
    ) -> "JustifyOptions":
        """Create options, filling gaps from config.

        Raises:
            ConfigurationError: If the width is out of range or not an
                integer, or the encoding is unknown.
        """
        if width is None:
            width = load_default_width()
        if encoding is None:
            encoding = DEFAULT_ENCODING
        try:
            return cls(width=width, encoding=encoding)
        except ValidationError as e:
            problems = []
            for err in e.errors():
                # Validator errors keep the original exception in ctx
                cause = err.get("ctx", {}).get("error")
                problems.append(str(cause) if cause is not None else "{}: {}".format(
                    ".".join(str(p) for p in err["loc"]), err["msg"]
                ))
            raise ConfigurationError(" ".join(problems)) from None
