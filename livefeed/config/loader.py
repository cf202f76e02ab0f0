"""Topics configuration loader."""

from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from livefeed.config.schemas.topics import TopicsConfig


logger = structlog.get_logger()


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[dict[str, str]], file_path: str) -> None:
        """Initialize the error.

        Args:
            errors: List of validation error details.
            file_path: Path to the file that failed validation.
        """
        self.errors = errors
        self.file_path = file_path
        super().__init__(f"Validation failed for {file_path}: {len(errors)} errors")


def _format_errors(error: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "loc": ".".join(str(part) for part in detail["loc"]),
            "msg": detail["msg"],
            "type": detail["type"],
        }
        for detail in error.errors()
    ]


def load_topics_config(path: Path) -> TopicsConfig:
    """Load and validate a topics YAML file.

    Args:
        path: Path to topics.yaml.

    Returns:
        Validated TopicsConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed or fails validation.
    """
    log = logger.bind(component="config", file_path=str(path))

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        log.error("config_yaml_error", error=str(e))
        raise ConfigValidationError(
            [{"loc": "", "msg": str(e), "type": "yaml_error"}], str(path)
        ) from e

    try:
        config = TopicsConfig.model_validate(parsed)
    except ValidationError as e:
        errors = _format_errors(e)
        log.error("config_validation_failed", error_count=len(errors))
        raise ConfigValidationError(errors, str(path)) from e

    log.info(
        "config_loaded",
        topics=len(config.topics),
        featured_count=config.featured.count,
    )
    return config
