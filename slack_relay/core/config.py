"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


# Slack Web API root; method names are appended directly
DEFAULT_API_URL = "https://slack.com/api/"

# Per-request timeout in milliseconds
DEFAULT_TIMEOUT_MS = 10 * 1000

DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class ClientConfig:
    """Settings a client keeps for its whole lifetime.

    Attributes:
        token: Slack API token merged into API calls (None to omit)
        timeout: Per-request timeout in milliseconds
        max_attempts: Total attempts per request, including the first
        url: Base URL that API method names are appended to
    """
    token: str | None = None
    timeout: int = DEFAULT_TIMEOUT_MS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    url: str = DEFAULT_API_URL


@dataclass
class Config:
    """Application configuration.

    Attributes:
        client: Client settings
        webhooks: Incoming webhook URLs to seed the client with
    """
    client: ClientConfig = field(default_factory=ClientConfig)
    webhooks: list[str] = field(default_factory=list)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_client_config(client: ClientConfig) -> list[ValidationError]:
    """Validate client settings.

    Pure function.

    Args:
        client: Client settings to check

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if client.timeout <= 0:
        errors.append(ValidationError(
            field="timeout",
            message=f"Timeout must be positive, got {client.timeout}",
        ))

    if client.max_attempts < 1:
        errors.append(ValidationError(
            field="max_attempts",
            message=f"max_attempts must be at least 1, got {client.max_attempts}",
        ))

    if not client.url:
        errors.append(ValidationError(
            field="url",
            message="API base URL is empty",
        ))
    elif not client.url.endswith("/"):
        # Method names are appended directly to the base URL
        errors.append(ValidationError(
            field="url",
            message=f"API base URL '{client.url}' does not end with '/'",
            severity="warning",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    errors.extend(validate_client_config(config.client))

    for i, webhook in enumerate(config.webhooks):
        if not webhook or webhook.startswith("${"):
            errors.append(ValidationError(
                field=f"webhooks[{i}]",
                message="Webhook URL not resolved (still contains placeholder)",
                severity="warning",
            ))

    if not config.webhooks:
        errors.append(ValidationError(
            field="webhooks",
            message="No webhooks configured",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
