"""Adapters – HTTP transport and web framework integrations."""
