"""Map declarative GitLab resource parameters to API options and observations."""

__version__ = "0.1.0"