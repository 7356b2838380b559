"""Bindings between the fuzzy date model and third-party frameworks."""
