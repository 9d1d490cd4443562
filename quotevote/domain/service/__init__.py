"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .edit_guard import EditGuard, can_edit
from .jwt_service import JWTService
from .query_builder import ListingQueryBuilder
from .quote_service import QuoteService
from .vote_service import VoteService, plan_transition

__all__ = [
    "AuthService",
    "EditGuard",
    "JWTService",
    "ListingQueryBuilder",
    "QuoteService",
    "Service",
    "VoteService",
    "can_edit",
    "plan_transition",
]
