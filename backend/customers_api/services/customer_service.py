"""
Customer service: get and create, delegating to the configured repository.
The alternate repository (if any) serves callers that ask for the other data-access path.
"""
from __future__ import annotations

import logging
from typing import Optional

from customers_api.core.errors import CustomerValidationError
from customers_api.models.domain import Address, Customer
from customers_api.repositories.base import CustomerRepository

logger = logging.getLogger(__name__)

_REQUIRED_ADDRESS_FIELDS = ("line1", "city", "post_code", "country")
_OPTIONAL_ADDRESS_FIELDS = ("line2", "line3", "line4")


def _check_text(
    problems: list[tuple[tuple[str, ...], str]],
    path: tuple[str, ...],
    value: Optional[str],
    required: bool,
    max_text_length: int,
) -> None:
    if value is None or not value.strip():
        if required:
            problems.append((path, "must not be blank"))
        return
    if len(value) > max_text_length:
        problems.append((path, f"must be at most {max_text_length} characters"))


def _check_address(
    problems: list[tuple[tuple[str, ...], str]],
    role: str,
    address: Address,
    max_text_length: int,
) -> None:
    for field in _REQUIRED_ADDRESS_FIELDS:
        _check_text(problems, (role, field), getattr(address, field), True, max_text_length)
    for field in _OPTIONAL_ADDRESS_FIELDS:
        _check_text(problems, (role, field), getattr(address, field), False, max_text_length)


def validate_customer(customer: Customer, max_text_length: int = 50) -> None:
    """
    Strict policy: names, line1, city, post_code and country non-blank on both
    addresses; every text value within ``max_text_length``.
    Raises CustomerValidationError listing every problem found.
    """
    problems: list[tuple[tuple[str, ...], str]] = []
    _check_text(problems, ("first_name",), customer.first_name, True, max_text_length)
    _check_text(problems, ("last_name",), customer.last_name, True, max_text_length)
    _check_address(problems, "billing_address", customer.billing_address, max_text_length)
    _check_address(problems, "shipping_address", customer.shipping_address, max_text_length)
    if problems:
        raise CustomerValidationError(problems)


class CustomerService:
    def __init__(
        self,
        repository: CustomerRepository,
        alternate: Optional[CustomerRepository] = None,
        strict_validation: bool = False,
        max_text_length: int = 50,
    ) -> None:
        self.repository = repository
        self.alternate = alternate
        self.strict_validation = strict_validation
        self.max_text_length = max_text_length

    def _select(self, use_alt_path: bool) -> CustomerRepository:
        if not use_alt_path:
            return self.repository
        if self.alternate is None:
            logger.debug("Alternate data-access path disabled; using primary")
            return self.repository
        return self.alternate

    def get_customer(self, customer_id: int, use_alt_path: bool = False) -> Optional[Customer]:
        """Customer by id, or None when absent."""
        return self._select(use_alt_path).get(customer_id)

    def create_customer(self, customer: Customer, use_alt_path: bool = False) -> int:
        """Store a new customer and return its id. Raises CustomerValidationError in strict mode."""
        if self.strict_validation:
            validate_customer(customer, self.max_text_length)
        repository = self._select(use_alt_path)
        new_id = repository.add(customer)
        logger.info(
            "Created customer %s via %s path",
            new_id,
            getattr(repository, "kind", type(repository).__name__),
        )
        return new_id
