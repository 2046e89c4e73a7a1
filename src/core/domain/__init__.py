"""Domain models and entities.

Pure data structures (pydantic v2). The domain knows nothing about the CLI,
files or the timezone database: only entries, rows and reports.
"""
