"""Shared helpers for ms-menu: errors, logging and environment parsing."""
