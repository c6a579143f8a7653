"""Logging setup for applications embedding monaditto."""
