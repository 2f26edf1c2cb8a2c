"""Order Creation tests — POST /collections/orders.

Tests cover:
    - Missing address/city/postcode/phone → 400; numeric phone/postcode accepted
    - Non-finite numbers in the body → 400
    - lessonIDs not an array → 400
    - Valid order → 201 with generated orderID, stored in "orders"
    - Extra fields stored verbatim
    - Orders route wins over the generic insert route
"""

import pytest
from bson import ObjectId

VALID_ORDER = {
    "name": "A",
    "email": "a@b.com",
    "address": "1 High Street",
    "city": "London",
    "postcode": "NW4 4BT",
    "phone": "07123456789",
    "lessonIDs": [1, 2],
}


async def test_order_missing_contact_fields_rejected(client, fake_db):
    res = await client.post(
        "/collections/orders",
        json={"name": "A", "email": "a@b.com", "lessonIDs": [1, 2]},
    )
    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert {"body.address", "body.city", "body.postcode", "body.phone"} <= fields
    assert fake_db["orders"].documents == []


@pytest.mark.parametrize("lesson_ids", ["1,2", 7, None, {"a": 1}])
async def test_order_lesson_ids_must_be_array(client, lesson_ids):
    res = await client.post(
        "/collections/orders", json={**VALID_ORDER, "lessonIDs": lesson_ids},
    )
    assert res.status_code == 400


async def test_order_blank_name_rejected(client):
    res = await client.post("/collections/orders", json={**VALID_ORDER, "name": "  "})
    assert res.status_code == 400


async def test_valid_order_created_with_id(client, fake_db):
    res = await client.post("/collections/orders", json=VALID_ORDER)
    assert res.status_code == 201
    body = res.json()
    assert body["msg"] == "Order created successfully"
    assert ObjectId.is_valid(body["orderID"])

    stored = fake_db["orders"].documents
    assert len(stored) == 1
    assert str(stored[0]["_id"]) == body["orderID"]
    assert stored[0]["lessonIDs"] == [1, 2]


async def test_order_extra_fields_kept(client, fake_db):
    res = await client.post(
        "/collections/orders", json={**VALID_ORDER, "notes": "ring the bell"},
    )
    assert res.status_code == 201
    assert fake_db["orders"].documents[0]["notes"] == "ring the bell"


async def test_order_not_checked_against_lessons(client, fake_db):
    res = await client.post(
        "/collections/orders", json={**VALID_ORDER, "lessonIDs": [str(ObjectId())]},
    )
    assert res.status_code == 201
    assert fake_db["lessons"].calls == []


async def test_numeric_contact_fields_accepted_and_stored_as_sent(client, fake_db):
    order = {**VALID_ORDER, "phone": 7123456789, "postcode": 10115}
    res = await client.post("/collections/orders", json=order)
    assert res.status_code == 201
    stored = fake_db["orders"].documents[0]
    assert stored["phone"] == 7123456789
    assert stored["postcode"] == 10115


@pytest.mark.parametrize("field,value", [("phone", None), ("city", ["London"])])
async def test_contact_field_must_be_scalar(client, field, value):
    res = await client.post("/collections/orders", json={**VALID_ORDER, field: value})
    assert res.status_code == 400


async def test_order_with_non_finite_number_rejected(client, fake_db):
    body = (
        '{"name": "A", "email": "a@b.com", "address": "x", "city": "y",'
        ' "postcode": "z", "phone": "1", "lessonIDs": [1], "total": Infinity}'
    )
    res = await client.post(
        "/collections/orders", content=body,
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert fake_db["orders"].documents == []
