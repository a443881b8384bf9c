"""Model, decoders and error builders for checking HTTP traffic against OpenAPI 3 contracts."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "model",
    "operations",
    "params",
    "errors",
    "http_errors",
    "query_errors",
    "param_errors",
]