"""Configuration manager — read/write TOML config, resolve settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from ignition_signer.config.constants import (
    CONFIG_FILE,
    ENV_FORMAT,
    ENV_MANIFEST_NAME,
)
from ignition_signer.config.models import CLIConfig
from ignition_signer.errors import ConfigurationError

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

SETTINGS = tuple(CLIConfig.model_fields)


class ConfigManager:
    """Manages CLI configuration on disk and resolves effective settings."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        try:
            data = tomllib.loads(raw.decode())
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid config file {self.config_path}: {exc}") from exc
        return self._build({key: data[key] for key in SETTINGS if key in data})

    @staticmethod
    def _build(values: dict[str, Any]) -> CLIConfig:
        try:
            return CLIConfig(**values)
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            raise ConfigurationError(messages) from exc

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Secure directory permissions (owner-only)
        os.chmod(self.config_path.parent, 0o700)
        # Remove defaults to keep config clean
        data = self.config.model_dump(exclude_defaults=True)
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def set_value(self, key: str, value: str) -> CLIConfig:
        if key not in SETTINGS:
            raise ConfigurationError(
                f"Unknown setting '{key}'. Valid settings: {', '.join(SETTINGS)}"
            )
        values = self.config.model_dump()
        values[key] = value
        self._config = self._build(values)
        self.save()
        return self._config

    def reset(self) -> bool:
        self._config = CLIConfig()
        if not self.config_path.exists():
            return False
        self.config_path.unlink()
        return True

    def resolve_settings(
        self,
        fmt: str | None = None,
        manifest_name: str | None = None,
    ) -> CLIConfig:
        """Resolve effective settings.

        Precedence: CLI flags > env vars > config file.
        """
        return self._build({
            "default_format": (
                fmt or os.environ.get(ENV_FORMAT) or self.config.default_format
            ),
            "manifest_name": (
                manifest_name
                or os.environ.get(ENV_MANIFEST_NAME)
                or self.config.manifest_name
            ),
        })
