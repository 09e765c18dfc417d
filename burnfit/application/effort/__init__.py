"""Effort application layer."""
