"""Seeding and logging helpers."""
