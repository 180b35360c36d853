"""Shared utilities for csvdoc."""
