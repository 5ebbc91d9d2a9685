"""HTTP surface: JSON task API and dashboard."""
