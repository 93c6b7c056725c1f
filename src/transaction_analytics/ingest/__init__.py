"""Seed/reset loader that repopulates the transactions collection."""
