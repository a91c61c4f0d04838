"""Domain layer for the EV station monitor."""
