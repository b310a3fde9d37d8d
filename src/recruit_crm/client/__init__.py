"""Python client for the CRM HTTP API."""

from .api import ApiError, CRMApiClient

__all__ = ["ApiError", "CRMApiClient"]
