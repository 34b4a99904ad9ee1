"""Audit client configuration.

Defines banner timings, history display size and upload form defaults,
with environment variable overrides.

Environment Variables:
- FHE_AUDIT_SUCCESS_CLEAR_SECONDS: Success banner lifetime (default: 2.0)
- FHE_AUDIT_ERROR_CLEAR_SECONDS: Error banner lifetime (default: 3.0)
- FHE_AUDIT_HISTORY_DISPLAY_LIMIT: History entries shown (default: 5)
- FHE_AUDIT_DEFAULT_COMPLEXITY: Form complexity default (default: 5)
- FHE_AUDIT_DEFAULT_VULNERABILITY_SCORE: Form score default (default: 5)
- FHE_AUDIT_LOG_ENVIRONMENT: "production" (JSON logs) or "development"
  (console logs) (default: production)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from fhe_audit.domain.models.audit_record import MAX_SCORE, MIN_SCORE
from fhe_audit.domain.models.session_state import SessionSettings
from fhe_audit.domain.models.upload import UploadForm

LOG_ENVIRONMENTS = frozenset({"production", "development"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class AuditClientConfig:
    """Configuration for the audit client session.

    Attributes:
        success_clear_seconds: Delay before a success banner hides.
        error_clear_seconds: Delay before an error banner hides.
        history_display_limit: History entries shown in the recent view.
        default_complexity: Complexity the upload form resets to.
        default_vulnerability_score: Score the upload form resets to.
        log_environment: structlog rendering mode.
    """

    success_clear_seconds: float = 2.0
    error_clear_seconds: float = 3.0
    history_display_limit: int = 5
    default_complexity: int = 5
    default_vulnerability_score: int = 5
    log_environment: str = "production"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.success_clear_seconds < 0:
            raise ValueError(
                f"success_clear_seconds must be non-negative, got {self.success_clear_seconds}"
            )
        if self.error_clear_seconds < 0:
            raise ValueError(
                f"error_clear_seconds must be non-negative, got {self.error_clear_seconds}"
            )
        if self.history_display_limit < 1:
            raise ValueError(
                f"history_display_limit must be at least 1, got {self.history_display_limit}"
            )
        for label, value in (
            ("default_complexity", self.default_complexity),
            ("default_vulnerability_score", self.default_vulnerability_score),
        ):
            if not MIN_SCORE <= value <= MAX_SCORE:
                raise ValueError(
                    f"{label} must be between {MIN_SCORE} and {MAX_SCORE}, got {value}"
                )
        if self.log_environment not in LOG_ENVIRONMENTS:
            raise ValueError(
                f"log_environment must be one of {sorted(LOG_ENVIRONMENTS)}, "
                f"got {self.log_environment!r}"
            )

    @classmethod
    def from_environment(cls) -> AuditClientConfig:
        """Create config from environment variables with defaults."""
        return cls(
            success_clear_seconds=_get_float_env("FHE_AUDIT_SUCCESS_CLEAR_SECONDS", 2.0),
            error_clear_seconds=_get_float_env("FHE_AUDIT_ERROR_CLEAR_SECONDS", 3.0),
            history_display_limit=_get_int_env("FHE_AUDIT_HISTORY_DISPLAY_LIMIT", 5),
            default_complexity=_get_int_env("FHE_AUDIT_DEFAULT_COMPLEXITY", 5),
            default_vulnerability_score=_get_int_env(
                "FHE_AUDIT_DEFAULT_VULNERABILITY_SCORE", 5
            ),
            log_environment=os.environ.get("FHE_AUDIT_LOG_ENVIRONMENT", "production"),
        )

    def default_form(self) -> UploadForm:
        """Empty upload form with the configured score defaults."""
        return UploadForm(
            complexity=self.default_complexity,
            vulnerability_score=self.default_vulnerability_score,
        )

    def session_settings(self) -> SessionSettings:
        """Reducer settings derived from this config."""
        return SessionSettings(
            success_clear_seconds=self.success_clear_seconds,
            error_clear_seconds=self.error_clear_seconds,
            default_form=self.default_form(),
        )


# Default configuration
DEFAULT_AUDIT_CLIENT_CONFIG = AuditClientConfig()

# Test configuration: banners clear immediately
TEST_AUDIT_CLIENT_CONFIG = AuditClientConfig(
    success_clear_seconds=0.0,
    error_clear_seconds=0.0,
    log_environment="development",
)
