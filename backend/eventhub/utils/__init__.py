"""Shared helpers: errors, logging, request parameter parsing."""
