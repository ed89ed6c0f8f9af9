"""UFC fight and fighter analytics dashboard."""
