"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "ignition-signer"
APP_AUTHOR = "SFLOW"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_FORMAT = "IGNITION_SIGNER_FORMAT"
ENV_MANIFEST_NAME = "IGNITION_SIGNER_MANIFEST"

# Resource defaults
DEFAULT_MANIFEST_NAME = "resource.json"
DEFAULT_FORMAT = "json"
DOCUMENT_FORMATS = ("json", "yaml")
