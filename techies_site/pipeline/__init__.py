"""Headless pipeline stages: extraction, site generation and verification."""
