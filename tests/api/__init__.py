"""HTTP tests through the FastAPI app."""
