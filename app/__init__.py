"""NSW address lookup service."""
