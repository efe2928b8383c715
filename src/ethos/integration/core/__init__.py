"""Configuration, logging, errors and session context."""
