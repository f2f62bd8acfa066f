"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from ignition_signer.config.manager import ConfigManager
from ignition_signer.models import (
    ApplicationScope,
    Attributes,
    LastModification,
    ProjectResource,
    ResourceManifest,
)

FIXTURES = Path(__file__).parent / "fixtures"

# Known-answer signatures for the resources under tests/fixtures, computed
# independently with sha256sum over the concatenated digest segments. The
# published Ignition signatures 7ea951ab... (script) and 1f2e193a... (view)
# are not pinned: the resource files they were computed from are not shipped
# here.

SCRIPT_SIGNATURE = "cc0174ced3f6620169c31e64d26d82b1e9609553cc208160e85310a6b09b82a6"
VIEW_SIGNATURE = "8b630bfe18a970c450e099b08ef4a764bf246d5f8950edb5375a81dce46da35a"
NAMED_QUERY_SIGNATURE = "42943e8c28f8f19508710bb1ccec14fdd4419a829c296532a6bc0e37d37dfee2"


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep commands away from the real config file and env overrides."""
    monkeypatch.delenv("IGNITION_SIGNER_FORMAT", raising=False)
    monkeypatch.delenv("IGNITION_SIGNER_MANIFEST", raising=False)
    manager = ConfigManager(config_path=tmp_path / "settings" / "config.toml")
    with patch("ignition_signer.commands._common._get_manager", return_value=manager):
        yield manager


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def modification() -> LastModification:
    return LastModification(
        actor="qq",
        timestamp=datetime(2022, 5, 26, 23, 20, 28, tzinfo=timezone.utc),
    )


@pytest.fixture
def script_manifest(modification: LastModification) -> ResourceManifest:
    """The manifest of the ``script`` fixture resource."""
    return ResourceManifest(
        scope=ApplicationScope.ALL,
        version=1,
        overridable=True,
        files=["code.py"],
        attributes=Attributes.build(modification, SCRIPT_SIGNATURE),
    )


@pytest.fixture
def script_resource(script_manifest: ResourceManifest) -> ProjectResource:
    return ProjectResource(
        manifest=script_manifest,
        data={"code.py": (FIXTURES / "script" / "code.py").read_bytes()},
    )


@pytest.fixture
def copy_fixture(tmp_path: Path) -> Callable[[str], Path]:
    """Copy a fixture resource directory into tmp_path and return its path."""

    def _copy(name: str) -> Path:
        dest = tmp_path / "resources" / name
        dest.mkdir(parents=True)
        for file in (FIXTURES / name).iterdir():
            (dest / file.name).write_bytes(file.read_bytes())
        return dest

    return _copy


@pytest.fixture
def make_resource_dir(tmp_path: Path) -> Callable[..., Path]:
    """Write a resource directory from a manifest dict and file contents."""

    def _make(
        manifest: dict[str, Any],
        files: dict[str, bytes] | None = None,
        name: str = "resource",
    ) -> Path:
        dest = tmp_path / "resources" / name
        dest.mkdir(parents=True)
        (dest / "resource.json").write_text(json.dumps(manifest, indent=2))
        for file_name, content in (files or {}).items():
            (dest / file_name).write_bytes(content)
        return dest

    return _make
