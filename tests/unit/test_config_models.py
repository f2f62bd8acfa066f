"""Tests for config models."""

import pytest
from pydantic import ValidationError

from ignition_signer.config.models import CLIConfig


class TestCLIConfig:
    def test_defaults(self):
        c = CLIConfig()
        assert c.default_format == "json"
        assert c.manifest_name == "resource.json"

    def test_format_case_insensitive(self):
        assert CLIConfig(default_format="YAML").default_format == "yaml"

    def test_format_must_be_document_format(self):
        with pytest.raises(ValidationError, match="Format must be one of"):
            CLIConfig(default_format="table")

    @pytest.mark.parametrize("name", ["", "dir/resource.json", "dir\\resource.json", ".", ".."])
    def test_manifest_name_must_be_plain(self, name):
        with pytest.raises(ValidationError, match="plain file name"):
            CLIConfig(manifest_name=name)

    def test_custom_manifest_name(self):
        assert CLIConfig(manifest_name="meta.json").manifest_name == "meta.json"
