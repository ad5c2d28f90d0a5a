"""yu: a container framework based on docker-compose."""

__version__ = "0.1.0"
