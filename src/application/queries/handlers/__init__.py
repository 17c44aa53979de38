"""Query handlers (one class per query)."""
