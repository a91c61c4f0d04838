"""Application services for the EV station monitor."""
