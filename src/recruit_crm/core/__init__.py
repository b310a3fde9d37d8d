"""Core configuration, logging, errors and database plumbing."""
