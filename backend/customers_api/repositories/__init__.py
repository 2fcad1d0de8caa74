from customers_api.repositories.base import CustomerRepository
from customers_api.repositories.customer_repo import SqlCustomerRepository
from customers_api.repositories.factory import alternate_kind, build_repository
from customers_api.repositories.orm_repo import OrmCustomerRepository

__all__ = [
    "CustomerRepository",
    "OrmCustomerRepository",
    "SqlCustomerRepository",
    "alternate_kind",
    "build_repository",
]
