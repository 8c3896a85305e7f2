# app/routers/loyalty_cards.py

import logging
import uuid

from fastapi import APIRouter, Depends, Query, status
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from app.core.errors import ApiError
from app.crud import loyalty_card as crud_card
from app.dependencies import get_db
from app.schemas.loyalty_card import LoyaltyCard, LoyaltyCardCreate, LoyaltyCardCreated, LoyaltyCardList

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/loyalty_cards")


@router.get("", response_model=LoyaltyCardList)
def list_cards(
    customer_id: uuid.UUID | None = Query(None),
    business_id: uuid.UUID | None = Query(None),
    db: Session = Depends(get_db),
):
    """
    Карты клиента (customer_id) или все карты бизнеса (business_id).
    Если переданы оба параметра, фильтр по клиенту главнее.
    """
    if customer_id is None and business_id is None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Either customer_id or business_id is required")

    if customer_id is not None:
        cards = crud_card.get_cards_by_customer(db, customer_id)
    else:
        cards = crud_card.get_cards_by_business(db, business_id)
    return LoyaltyCardList(cards=cards)


@router.post("", response_model=LoyaltyCardCreated, status_code=status.HTTP_201_CREATED)
def create_card(payload: LoyaltyCardCreate, db: Session = Depends(get_db)):
    card, created = crud_card.create_card(db, **payload.model_dump())
    if not created:
        logger.info(f"Loyalty card for customer {payload.customer_id} in business {payload.business_id} already exists")
        raise ApiError(
            status.HTTP_409_CONFLICT,
            "A loyalty card already exists for this customer and business",
            card=jsonable_encoder(LoyaltyCard.model_validate(card)),
        )

    logger.info(f"Loyalty card {card.id} created")
    return LoyaltyCardCreated(message="Loyalty card created successfully", card=card)
