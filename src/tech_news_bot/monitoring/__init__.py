"""Logging setup for the tech news bot."""
