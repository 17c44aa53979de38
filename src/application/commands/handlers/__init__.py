"""Command handlers (one class per command)."""
