"""Persistence adapters for the company version log."""
