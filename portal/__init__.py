"""Citizen registration backend for the Smart City portal."""
