"""Order Schemas — required-field checks for POST /collections/orders.

Invariants:
    - name, email, address, city, postcode, phone: present, not null, and when a
      string not blank; numbers are accepted and stored with their JSON type
    - lessonIDs: an array (order preserved); items are lesson ids as str or int
    - Unknown fields are kept and stored verbatim (extra="allow")
    - No check that the referenced lessons exist or have spaces left
"""

from pydantic import (
    BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr, field_validator,
)

OrderScalar = StrictStr | StrictInt | StrictFloat


class OrderCreate(BaseModel):
    """Order placement — validated before insertion into the orders collection."""
    model_config = ConfigDict(extra="allow")

    name: OrderScalar
    email: OrderScalar
    address: OrderScalar
    city: OrderScalar
    postcode: OrderScalar
    phone: OrderScalar
    lessonIDs: list[StrictStr | StrictInt]

    @field_validator("name", "email", "address", "city", "postcode", "phone")
    @classmethod
    def reject_blank(cls, v: OrderScalar) -> OrderScalar:
        if isinstance(v, str) and not v.strip():
            raise ValueError("field cannot be blank")
        return v


class OrderCreated(BaseModel):
    msg: str = "Order created successfully"
    orderID: str
