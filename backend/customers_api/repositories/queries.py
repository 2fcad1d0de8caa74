"""
Exact SQL for the direct-SQL path: fetch by id, insert, last inserted id.
Use with parameter binding; aliases and bind names match the row keys in mapping.py.
"""

# ---------------------------------------------------------------------------
# 1) Customer by id
#    Address columns are aliased to their prefixed row keys so the two
#    addresses can be rebuilt from one flat row.
# ---------------------------------------------------------------------------
SQL_CUSTOMER_BY_ID = """
SELECT
    c."Id" AS id,
    c."FirstName" AS first_name,
    c."LastName" AS last_name,
    c."BillingAddressLine1" AS billing_address_line1,
    c."BillingAddressLine2" AS billing_address_line2,
    c."BillingAddressLine3" AS billing_address_line3,
    c."BillingAddressLine4" AS billing_address_line4,
    c."BillingAddressCity" AS billing_address_city,
    c."BillingAddressPostCode" AS billing_address_post_code,
    c."BillingAddressCountry" AS billing_address_country,
    c."ShippingAddressLine1" AS shipping_address_line1,
    c."ShippingAddressLine2" AS shipping_address_line2,
    c."ShippingAddressLine3" AS shipping_address_line3,
    c."ShippingAddressLine4" AS shipping_address_line4,
    c."ShippingAddressCity" AS shipping_address_city,
    c."ShippingAddressPostCode" AS shipping_address_post_code,
    c."ShippingAddressCountry" AS shipping_address_country
FROM "Customer" c
WHERE c."Id" = :customer_id;
"""

# ---------------------------------------------------------------------------
# 2) Insert one customer (16 columns; Id assigned by AUTOINCREMENT)
# ---------------------------------------------------------------------------
SQL_CUSTOMER_INSERT = """
INSERT INTO "Customer" (
    "FirstName",
    "LastName",
    "BillingAddressLine1",
    "BillingAddressLine2",
    "BillingAddressLine3",
    "BillingAddressLine4",
    "BillingAddressCity",
    "BillingAddressPostCode",
    "BillingAddressCountry",
    "ShippingAddressLine1",
    "ShippingAddressLine2",
    "ShippingAddressLine3",
    "ShippingAddressLine4",
    "ShippingAddressCity",
    "ShippingAddressPostCode",
    "ShippingAddressCountry"
) VALUES (
    :first_name,
    :last_name,
    :billing_address_line1,
    :billing_address_line2,
    :billing_address_line3,
    :billing_address_line4,
    :billing_address_city,
    :billing_address_post_code,
    :billing_address_country,
    :shipping_address_line1,
    :shipping_address_line2,
    :shipping_address_line3,
    :shipping_address_line4,
    :shipping_address_city,
    :shipping_address_post_code,
    :shipping_address_country
);
"""

# ---------------------------------------------------------------------------
# 3) Id assigned by the preceding INSERT (must run on the same connection)
# ---------------------------------------------------------------------------
SQL_LAST_INSERT_ID = """
SELECT last_insert_rowid();
"""
