"""Customer table: name plus billing/shipping addresses flattened into prefixed columns."""
from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from customers_api.db.session import Base

TEXT_LENGTH = 50


class CustomerRecord(Base):
    __tablename__ = "Customer"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str | None] = mapped_column("FirstName", String(TEXT_LENGTH))
    last_name: Mapped[str | None] = mapped_column("LastName", String(TEXT_LENGTH))

    billing_address_line1: Mapped[str | None] = mapped_column("BillingAddressLine1", String(TEXT_LENGTH))
    billing_address_line2: Mapped[str | None] = mapped_column("BillingAddressLine2", String(TEXT_LENGTH))
    billing_address_line3: Mapped[str | None] = mapped_column("BillingAddressLine3", String(TEXT_LENGTH))
    billing_address_line4: Mapped[str | None] = mapped_column("BillingAddressLine4", String(TEXT_LENGTH))
    billing_address_city: Mapped[str | None] = mapped_column("BillingAddressCity", String(TEXT_LENGTH))
    billing_address_post_code: Mapped[str | None] = mapped_column("BillingAddressPostCode", String(TEXT_LENGTH))
    billing_address_country: Mapped[str | None] = mapped_column("BillingAddressCountry", String(TEXT_LENGTH))

    shipping_address_line1: Mapped[str | None] = mapped_column("ShippingAddressLine1", String(TEXT_LENGTH))
    shipping_address_line2: Mapped[str | None] = mapped_column("ShippingAddressLine2", String(TEXT_LENGTH))
    shipping_address_line3: Mapped[str | None] = mapped_column("ShippingAddressLine3", String(TEXT_LENGTH))
    shipping_address_line4: Mapped[str | None] = mapped_column("ShippingAddressLine4", String(TEXT_LENGTH))
    shipping_address_city: Mapped[str | None] = mapped_column("ShippingAddressCity", String(TEXT_LENGTH))
    shipping_address_post_code: Mapped[str | None] = mapped_column("ShippingAddressPostCode", String(TEXT_LENGTH))
    shipping_address_country: Mapped[str | None] = mapped_column("ShippingAddressCountry", String(TEXT_LENGTH))
