"""Multi-tenant recruitment CRM backend."""

__version__ = "0.1.0"
