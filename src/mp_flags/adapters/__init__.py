"""Adapters – concrete store, cache and transport integrations."""
