"""Utilities for faviconurl."""
