"""Shared helpers: request parsing, decorators, upload storage."""
