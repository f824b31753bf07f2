"""
Module: survey_builder.config

Purpose:
    Settings for a builder session. Immutable configuration with
    validation on construction.

Key Classes:
    - BuilderSettings: Banner timing, gate message and export formatting

Used By:
    - survey_builder.session: SurveySession
    - survey_builder.banner: ValidationBanner
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_BANNER_TIMEOUT_SECONDS = 3.0
DEFAULT_INCOMPLETE_MESSAGE = "Please complete all questions before adding a new one."


@dataclass(frozen=True)
class BuilderSettings:
    """
    Configuration for a survey builder session (immutable).

    Attributes:
        banner_timeout_seconds: Delay before the validation banner auto-dismisses
        incomplete_message: Banner text shown when adding a question is refused
        json_indent: Indent for JSON export (None = compact)

    Example:
        >>> settings = BuilderSettings(banner_timeout_seconds=5.0)
    """

    banner_timeout_seconds: float = DEFAULT_BANNER_TIMEOUT_SECONDS
    incomplete_message: str = DEFAULT_INCOMPLETE_MESSAGE
    json_indent: Optional[int] = None

    def __post_init__(self) -> None:
        if self.banner_timeout_seconds <= 0:
            raise ValueError(
                f"banner_timeout_seconds must be positive, got {self.banner_timeout_seconds}"
            )
        if not self.incomplete_message.strip():
            raise ValueError("incomplete_message must not be empty")
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(f"json_indent must be None or >= 0, got {self.json_indent}")
