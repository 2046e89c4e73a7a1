"""Core: domain models, settings, locator and report service."""
