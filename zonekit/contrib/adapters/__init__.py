"""Contributed adapters for zonekit."""
