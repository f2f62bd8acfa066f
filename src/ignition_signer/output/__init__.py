"""Output formatting for tables, JSON, and YAML."""
