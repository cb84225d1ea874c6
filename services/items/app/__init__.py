"""Items service: a FastAPI app backed by a platform-bound document store."""
