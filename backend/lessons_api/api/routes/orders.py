"""Order Creation — POST /collections/orders into the fixed orders collection.

Invariants:
    - Body validated by OrderCreate before any store call (400 otherwise)
    - Inserted into "orders" regardless of any other route context
    - Returns 201 with the generated orderID
    - Lesson ids are not checked against the lessons collection
"""

import logging

from fastapi import APIRouter, Depends, status

from lessons_api.core.documents import ensure_finite
from lessons_api.core.domain_types import ORDERS_COLLECTION
from lessons_api.infrastructure.database import DocumentStoreManager, get_store
from lessons_api.schemas.order import OrderCreate, OrderCreated

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/collections", tags=["orders"])


@router.post(
    "/orders", response_model=OrderCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate, store: DocumentStoreManager = Depends(get_store),
):
    """Place an order referencing a list of lesson ids."""
    logger.info(
        f"Received order for {len(body.lessonIDs)} lesson(s)",
        extra={"collection": ORDERS_COLLECTION},
    )
    order = ensure_finite(body.model_dump())
    order_id = await store.repository(ORDERS_COLLECTION).insert(order)
    logger.info(
        f"Order inserted with ID: {order_id}",
        extra={"collection": ORDERS_COLLECTION, "document_id": str(order_id)},
    )
    return OrderCreated(orderID=str(order_id))
