from customers_api.models import Address, Customer
from customers_api.repositories.mapping import (
    BILLING_PREFIX,
    ROW_KEYS,
    address_from_row,
    address_to_row,
    customer_to_row,
    row_to_customer,
)


def _customer():
    return Customer(
        first_name="Ada",
        last_name="Lovelace",
        billing_address=Address(
            line1="1 Main St", line2="Floor 2", city="London", post_code="AB1 2CD", country="UK"
        ),
        shipping_address=Address(line1="2 Side St", city="Paris", post_code="75001", country="FR"),
    )


def test_customer_to_row_flattens_sixteen_keys_without_id():
    row = customer_to_row(_customer())
    assert tuple(row) == ROW_KEYS
    assert len(row) == 16
    assert "id" not in row
    assert row["billing_address_line2"] == "Floor 2"
    assert row["shipping_address_city"] == "Paris"
    assert row["shipping_address_line2"] is None


def test_row_to_customer_rebuilds_both_addresses():
    row = {**customer_to_row(_customer()), "id": 7}
    customer = row_to_customer(row)
    expected = _customer()
    expected.id = 7
    assert customer == expected
    assert customer.billing_address is not customer.shipping_address


def test_address_halves_use_prefix():
    address = Address(line1="a", city="b", post_code="c", country="d", line4="e")
    row = address_to_row(address, BILLING_PREFIX)
    assert set(row) == {BILLING_PREFIX + f for f in ("line1", "line2", "line3", "line4", "city", "post_code", "country")}
    assert address_from_row(row, BILLING_PREFIX) == address
