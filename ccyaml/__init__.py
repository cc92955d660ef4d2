"""Data model, value parsers, diagnostic assertions and Docker Hub lookups for CircleCI configuration tooling."""

__version__ = "0.1.0"

__all__ = [
    "lsptypes",
    "parameters",
    "executors",
    "model",
    "dockerimage",
    "orburl",
    "expect",
    "dockerhub",
    "cli",
]