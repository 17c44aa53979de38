"""Presentation layer - FastAPI routers, auth dependencies, Problem Details.

Routers translate HTTP bodies into commands/queries and Result values into
responses; they hold no identity rules.
"""
