"""Thin API layer: fetch a customer by id and create a customer."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from customers_api.core.errors import CustomerValidationError
from customers_api.models.domain import Address, Customer
from customers_api.services.customer_service import CustomerService

router = APIRouter(prefix="/api/customers", tags=["customers"])


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AddressIn(CamelModel):
    line1: str
    line2: Optional[str] = None
    line3: Optional[str] = None
    line4: Optional[str] = None
    city: str
    post_code: str
    country: str


class CustomerIn(CamelModel):
    first_name: str
    last_name: str
    billing_address: AddressIn
    shipping_address: AddressIn


class AddressOut(CamelModel):
    line1: Optional[str]
    line2: Optional[str]
    line3: Optional[str]
    line4: Optional[str]
    city: Optional[str]
    post_code: Optional[str]
    country: Optional[str]


class CustomerOut(CamelModel):
    id: int
    first_name: Optional[str]
    last_name: Optional[str]
    billing_address: AddressOut
    shipping_address: AddressOut


class CustomerCreated(BaseModel):
    id: int


def _address_from_request(body: AddressIn) -> Address:
    return Address(
        line1=body.line1,
        line2=body.line2,
        line3=body.line3,
        line4=body.line4,
        city=body.city,
        post_code=body.post_code,
        country=body.country,
    )


def _address_to_response(address: Address) -> AddressOut:
    return AddressOut(
        line1=address.line1,
        line2=address.line2,
        line3=address.line3,
        line4=address.line4,
        city=address.city,
        post_code=address.post_code,
        country=address.country,
    )


def get_customer_service(request: Request) -> CustomerService:
    """Service built by create_app and stored on app.state."""
    return request.app.state.customer_service


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(
    customer_id: int,
    use_alt_path: bool = Query(False, alias="useAltPath"),
    service: CustomerService = Depends(get_customer_service),
):
    """Fetch one customer; 404 when the id is unknown."""
    customer = service.get_customer(customer_id, use_alt_path=use_alt_path)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return CustomerOut(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        billing_address=_address_to_response(customer.billing_address),
        shipping_address=_address_to_response(customer.shipping_address),
    )


@router.post("", response_model=CustomerCreated)
def create_customer(
    body: CustomerIn,
    use_alt_path: bool = Query(False, alias="useAltPath"),
    service: CustomerService = Depends(get_customer_service),
):
    """
    Copy the payload field by field into a new Customer and store it.
    Returns the id assigned by the database.
    """
    customer = Customer(
        first_name=body.first_name,
        last_name=body.last_name,
        billing_address=_address_from_request(body.billing_address),
        shipping_address=_address_from_request(body.shipping_address),
    )
    try:
        new_id = service.create_customer(customer, use_alt_path=use_alt_path)
    except CustomerValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[{"loc": list(path), "msg": msg} for path, msg in e.problems],
        )
    return CustomerCreated(id=new_id)
