"""Configuration, logging setup and startup checks."""
