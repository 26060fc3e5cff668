"""Fake implementations for dependency injection in tests."""

from tests.unit.fakes.fake_inventory import FakeInventory, FakeInventoryFactory

__all__ = ["FakeInventory", "FakeInventoryFactory"]
