"""Base classes and utilities for property-based testing."""

import random
from typing import Any, Iterable

import pytest
from hypothesis import event, note

from recruit_crm.store.memory import InMemoryDocumentStore

from tests.property_based.config import get_test_seed


class PropertyTestBase:
    """Base class for property-based tests with common utilities."""

    def setup_method(self):
        """Setup method called before each test."""
        seed = get_test_seed()
        if seed is not None:
            random.seed(seed)

    def log_test_data(self, description: str, data: Any):
        """Log test data for debugging purposes."""
        note(f"{description}: {data}")
        event(f"Testing {description}")

    def create_store(self) -> InMemoryDocumentStore:
        """Fresh store per example; hypothesis reruns the body many times."""
        return InMemoryDocumentStore()


class MultiTenantPropertyTest(PropertyTestBase):
    """Base class for multi-tenant property-based tests."""

    def verify_tenant_isolation(self, tenant_id: str, items: Iterable[Any]):
        """Verify that all items belong to the specified tenant."""
        for item in items:
            assert item.user_id == tenant_id, f"Item {item.id} does not belong to tenant {tenant_id}"


def property_test(feature_name: str, property_number: int, property_description: str):
    """Decorator to mark and tag property-based tests."""
    def decorator(test_func):
        test_func._property_test_metadata = {
            "feature": feature_name,
            "property_number": property_number,
            "description": property_description,
            "tag": f"Feature: {feature_name}, Property {property_number}: {property_description}"
        }
        return pytest.mark.property_test(test_func)
    return decorator
