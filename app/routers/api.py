# app/routers/api.py

from fastapi import APIRouter

from app.routers import (
    comments,
    health,
    loyalty_cards,
    programs,
    qr_codes,
    redemption_codes,
    rewards,
    settings,
    transactions,
)

# Главный роутер: все пути получают префикс /api
api_router = APIRouter(prefix="/api")

api_router.include_router(health.router, tags=["Health"])
api_router.include_router(comments.router, tags=["Comments"])
api_router.include_router(programs.router, tags=["Loyalty Programs"])
api_router.include_router(loyalty_cards.router, tags=["Loyalty Cards"])
api_router.include_router(rewards.router, tags=["Rewards"])
api_router.include_router(redemption_codes.router, tags=["Redemption Codes"])
api_router.include_router(qr_codes.router, tags=["QR Codes"])
api_router.include_router(settings.router, tags=["Settings"])
api_router.include_router(transactions.router, tags=["Transactions"])
