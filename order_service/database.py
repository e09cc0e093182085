"""
In-memory database for the order service
Stores orders keyed by id behind a single reader/writer lock
"""
from typing import Dict, Iterable, List, Optional

from .models import Order
from .rwlock import ReadWriteLock


class OrderDatabase:
    def __init__(self, orders: Optional[Iterable[Order]] = None):
        self.orders: Dict[str, Order] = {}
        self.lock = ReadWriteLock()
        for order in orders or ():
            self.orders[order.id] = order

    def save_order(self, order: Order) -> None:
        """Insert an order, replacing any order with the same id"""
        with self.lock.write_locked():
            self.orders[order.id] = order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        with self.lock.read_locked():
            return self.orders.get(order_id)

    def get_all_orders(self) -> List[Order]:
        """Get all orders, in no particular order"""
        with self.lock.read_locked():
            return list(self.orders.values())

    def update_order(self, order: Order) -> bool:
        """
        Replace the stored order that has the same id.
        Returns False and leaves the store alone when there is none.
        """
        with self.lock.write_locked():
            if order.id in self.orders:
                self.orders[order.id] = order
                return True
            return False

    def count(self) -> int:
        with self.lock.read_locked():
            return len(self.orders)
