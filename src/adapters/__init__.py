"""Adapters: config file reader, timezone database, clocks and exporters."""
