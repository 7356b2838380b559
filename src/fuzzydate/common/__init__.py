"""Helpers shared across the package that are not part of the domain model."""
