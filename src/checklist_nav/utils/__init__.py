"""Utility helpers for checklist_nav."""
