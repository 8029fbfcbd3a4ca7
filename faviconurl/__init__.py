"""Discover favicon and site icon URLs for web addresses."""
