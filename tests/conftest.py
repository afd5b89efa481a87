"""
Shared fixtures for grocery store tests.
"""

from pathlib import Path
from typing import Callable

import pytest

from grocery_store.config import DATA_DIR
from grocery_store.loaders.csv_loader import CsvLoader
from grocery_store.models.customer import Address, Customer
from grocery_store.repositories.order_repository import OrderRepository

CUSTOMERS_HEADER = "id,email,street,city,state,zip\n"
ORDERS_HEADER = "id,products,customer_id,fulfillment_status\n"


@pytest.fixture
def customer() -> Customer:
    """A customer with a Seattle address."""
    address = Address(street="123 Main", city="Seattle", state="WA", zip="98101")
    return Customer(123, "a@a.co", address)


@pytest.fixture
def bundled_loader() -> CsvLoader:
    """Loader over the 100-order data shipped with the package."""
    return CsvLoader(DATA_DIR / "customers.csv", DATA_DIR / "orders.csv")


@pytest.fixture
def repository(bundled_loader: CsvLoader) -> OrderRepository:
    """Repository over the bundled data."""
    return OrderRepository(bundled_loader)


@pytest.fixture
def write_sources(tmp_path: Path) -> Callable[..., CsvLoader]:
    """Write customer and order files under tmp_path and return a loader for them."""

    def _write(customers: str = "", orders: str = "", *, customers_header: str = CUSTOMERS_HEADER,
               orders_header: str = ORDERS_HEADER) -> CsvLoader:
        customers_path = tmp_path / "customers.csv"
        orders_path = tmp_path / "orders.csv"
        customers_path.write_text(customers_header + customers, encoding="utf-8")
        orders_path.write_text(orders_header + orders, encoding="utf-8")
        return CsvLoader(customers_path, orders_path)

    return _write
