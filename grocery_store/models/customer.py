"""
Customer domain model
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Postal address of a customer"""
    street: str
    city: str
    state: str
    zip: str


@dataclass(frozen=True, eq=False)
class Customer:
    """
    Customer identity and address.

    Equality is identity: orders loaded by the repository share one
    instance per customer id.
    """
    id: int
    email: str
    address: Address

    def __repr__(self):
        return f"<Customer(id={self.id}, email='{self.email}')>"
