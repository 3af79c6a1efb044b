"""HTTP service for checklist_nav."""
