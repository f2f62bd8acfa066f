"""CLI configuration: constants, models, and the TOML-backed manager."""
