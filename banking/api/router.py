"""API router aggregation."""

from fastapi import APIRouter

from banking.api import accounts, auth, transactions

api_router = APIRouter()

# Include routers
api_router.include_router(auth.router, tags=["Auth"])
api_router.include_router(accounts.router, tags=["Accounts"])
api_router.include_router(transactions.router, tags=["Transactions"])
