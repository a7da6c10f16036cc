"""Shared configuration loading for convert commands (private)."""

from pathlib import Path

from pydantic import ValidationError

from ..config.VaultliftConfig import VaultliftConfig
from .ConvertConfig import ConvertConfig


def _load_run_context(path: str | None, **overrides) -> tuple[VaultliftConfig, ConvertConfig, Path | None]:
    """Load config and merge command-line overrides into the convert defaults.

    ``None`` overrides keep the configured default.

    Raises:
        ValueError: If the config cannot be loaded or an override is invalid
    """
    config = VaultliftConfig.load()
    updates = {key: value for key, value in overrides.items() if value is not None}
    try:
        options = ConvertConfig(**{**config.convert.model_dump(), **updates})
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(x) for x in first.get("loc", ()))
        raise ValueError(f"Invalid option {field}: {first.get('msg', str(e))}") from e
    active = Path(path) if path else None
    return config, options, active
