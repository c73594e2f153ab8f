"""Enums and request parameter models for a payments API's resources."""

__version__ = "0.1.0"

__all__ = [
    "api_types",
    "balance",
    "billing",
    "card",
    "currency",
    "issuing",
    "payments",
    "statuses",
]