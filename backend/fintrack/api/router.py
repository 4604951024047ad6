"""
Main API router.
"""

from fastapi import APIRouter
from fintrack.api import transactions, summary, dashboard, settings

api_router = APIRouter()

api_router.include_router(transactions.router)
api_router.include_router(summary.router)
api_router.include_router(dashboard.router)
api_router.include_router(settings.router)
