"""Logging configuration for ldproxy."""
