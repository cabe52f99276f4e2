"""Building blocks for services: retries, validation, sorting, pagination, access control and caches."""

__version__ = "0.1.0"