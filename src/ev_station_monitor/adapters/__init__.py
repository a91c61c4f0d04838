"""Adapters for the EV station monitor."""
