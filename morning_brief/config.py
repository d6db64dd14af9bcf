"""
Configuration management using YAML files and dataclasses.

Configuration sections:
- TakeawayConfig: Takeaway selection settings
- OutputConfig: Report format settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import yaml


@dataclass
class TakeawayConfig:
    """Configuration for takeaway selection.

    Attributes:
        max_takeaways: Maximum number of takeaways shown on the page
    """

    max_takeaways: int = 3


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        format: "html" or "markdown"
        include_markdown: Whether to also generate markdown when format is "html"
        newsletter_limit: Number of newsletters listed in the digest section
        title: Report title
    """

    format: str = "html"
    include_markdown: bool = False
    newsletter_limit: int = 10
    title: str = "Morning Edition"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file inside the output directory
    """

    level: str = "INFO"
    console: bool = True
    file: bool = True
    format: str = "jsonl"
    filename: str = "run.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    takeaways: TakeawayConfig = field(default_factory=TakeawayConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: Any) -> AppConfig:
    """Merge raw YAML config into base AppConfig, ignoring unknown sections.

    Raises:
        ValueError: If the document or one of its sections is not a mapping,
            or a section contains an unknown key
    """
    if not isinstance(raw, dict):
        raise ValueError(
            f"Invalid config: expected a mapping at top level, got {type(raw).__name__}"
        )
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if value is None:
            continue
        if not isinstance(value, dict):
            raise ValueError(
                f"Invalid config: section '{key}' must be a mapping, got {type(value).__name__}"
            )
        unknown = sorted(str(name) for name in set(value) - set(data[key]))
        if unknown:
            raise ValueError(f"Invalid config: unknown keys in '{key}': {', '.join(unknown)}")
        data[key].update(value)
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        takeaways=TakeawayConfig(**data["takeaways"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
