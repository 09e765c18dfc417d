"""Nutrition application layer."""
