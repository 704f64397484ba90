"""Shared services: money arithmetic."""
