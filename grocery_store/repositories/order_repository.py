"""
Order Repository - Data Access Layer over the CSV sources
"""
import logging
from typing import Any, Dict, List, Optional

from grocery_store.exceptions import LoadError
from grocery_store.loaders.csv_loader import CsvLoader
from grocery_store.models.customer import Address, Customer
from grocery_store.models.order import Order

logger = logging.getLogger(__name__)


def _as_key(value: Any) -> Optional[int]:
    """Index key for a lookup value, None when it cannot be an id"""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class OrderRepository:
    """
    Read-only directory of orders joined to their customers.

    Source files are read once, on the first query or on reload(). Every
    order of a customer references the same Customer instance.
    """

    def __init__(self, loader: CsvLoader):
        self.loader = loader
        self._orders: Optional[List[Order]] = None
        self._by_id: Dict[int, Order] = {}
        self._by_customer: Dict[int, List[Order]] = {}

    @property
    def is_loaded(self) -> bool:
        return self._orders is not None

    def load(self) -> None:
        """Load the sources unless already loaded"""
        if self._orders is None:
            self.reload()

    def reload(self) -> None:
        """
        Read both sources and rebuild all indexes

        Raises:
            LoadError: If either source is malformed or an order references
                an unknown customer; the repository stays unloaded
        """
        self._orders = None
        self._by_id = {}
        self._by_customer = {}
        try:
            orders = self._build_orders()
        except LoadError as e:
            logger.error(f"Failed to load orders: {e}")
            raise

        by_id: Dict[int, Order] = {}
        by_customer: Dict[int, List[Order]] = {}
        for order in orders:
            by_id[order.id] = order
            by_customer.setdefault(order.customer.id, []).append(order)
        for customer_orders in by_customer.values():
            customer_orders.sort(key=lambda o: o.id)

        self._orders = orders
        self._by_id = by_id
        self._by_customer = by_customer
        logger.info(f"Indexed {len(orders)} orders for {len(by_customer)} customers")

    def _build_orders(self) -> List[Order]:
        customers: Dict[int, Customer] = {}
        for row in self.loader.read_customers():
            if row.id in customers:
                raise LoadError(f"duplicate customer id {row.id}", self.loader.customers_path)
            customers[row.id] = Customer(
                id=row.id,
                email=row.email,
                address=Address(street=row.street, city=row.city, state=row.state, zip=row.zip)
            )

        orders: List[Order] = []
        seen_ids = set()
        for row in self.loader.read_orders():
            if row.id in seen_ids:
                raise LoadError(f"duplicate order id {row.id}", self.loader.orders_path)
            customer = customers.get(row.customer_id)
            if customer is None:
                raise LoadError(
                    f"order {row.id} references unknown customer {row.customer_id}",
                    self.loader.orders_path
                )
            seen_ids.add(row.id)
            orders.append(Order(row.id, dict(row.products), customer, row.fulfillment_status))
        return orders

    def all(self) -> List[Order]:
        """Get all orders in source file order"""
        self.load()
        return list(self._orders)

    def find(self, order_id: Any) -> Optional[Order]:
        """Get order by ID, None when there is no such order"""
        self.load()
        key = _as_key(order_id)
        if key is None:
            return None
        return self._by_id.get(key)

    def find_by_customer(self, customer_id: Any) -> Optional[List[Order]]:
        """Get orders of a customer sorted by order ID, None when there are none"""
        self.load()
        key = _as_key(customer_id)
        if key is None:
            return None
        orders = self._by_customer.get(key)
        if not orders:
            return None
        return list(orders)

    def count(self) -> int:
        """Get total count of orders"""
        self.load()
        return len(self._orders)
