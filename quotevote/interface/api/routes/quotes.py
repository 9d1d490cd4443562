"""Quote routes.

Every route requires ``Authorization: Bearer <token>``. Domain errors raised
by the use cases are translated to responses by the global error handlers.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from quotevote.application.usecase.quote import (
    AddQuoteRequest,
    AddQuoteResponse,
    AddQuoteUseCase,
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetQuoteRequest,
    GetQuoteUseCase,
    ListQuotesRequest,
    ListQuotesUseCase,
    QuoteView,
    UpdateQuoteRequest,
    UpdateQuoteResponse,
    UpdateQuoteUseCase,
)
from quotevote.domain.service import JWTService
from quotevote.interface.api.security import bearer_scheme, bearer_token

router = APIRouter(prefix="/quotes", tags=["quotes"], route_class=DishkaRoute)


class AddQuoteAPIRequest(BaseModel):
    """API request for adding a quote."""

    text: str
    author: Optional[str] = None
    category: Optional[str] = None


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a quote."""

    action: str
    username: Optional[str] = None


class UpdateQuoteAPIRequest(BaseModel):
    """API request for replacing a quote's text."""

    text: str


@router.post(
    "/addQuote", response_model=AddQuoteResponse, status_code=status.HTTP_201_CREATED
)
async def add_quote(
    request: AddQuoteAPIRequest,
    add_quote_use_case: FromDishka[AddQuoteUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AddQuoteResponse:
    """Submit a new quote.

    Args:
        request: Quote text with optional author and category
        add_quote_use_case: Add quote use case from DI
        jwt_service: JWT service for token verification
        credentials: Bearer credentials

    Returns:
        The created quote
    """
    jwt_service.verify_credential(bearer_token(credentials))

    return await add_quote_use_case.execute(
        AddQuoteRequest(
            text=request.text,
            author=request.author,
            category=request.category,
        )
    )


# Declared before /{quote_id} so the literal path wins
@router.get("/getQuotes", response_model=list[QuoteView])
async def list_quotes(
    list_quotes_use_case: FromDishka[ListQuotesUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    limit: Optional[str] = Query(default=None),
    page: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None),
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_order: Optional[str] = Query(default=None, alias="sortOrder"),
) -> list[QuoteView]:
    """List quotes with filtering, sorting and pagination.

    Parameters are taken as raw strings; invalid paging values fall back to
    the defaults instead of being rejected.

    Returns:
        Matching quotes (possibly empty)
    """
    jwt_service.verify_credential(bearer_token(credentials))

    response = await list_quotes_use_case.execute(
        ListQuotesRequest(
            limit=limit,
            page=page,
            search=search,
            category=category,
            sort_by=sort_by,
            sort_order=sort_order,
        )
    )
    return response.quotes


@router.get("/{quote_id}", response_model=QuoteView)
async def get_quote(
    quote_id: str,
    get_quote_use_case: FromDishka[GetQuoteUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> QuoteView:
    """Fetch a single quote."""
    jwt_service.verify_credential(bearer_token(credentials))

    return await get_quote_use_case.execute(GetQuoteRequest(quote_id=quote_id))


@router.post("/vote/{quote_id}", response_model=CastVoteResponse)
async def cast_vote(
    quote_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CastVoteResponse:
    """Vote on or unvote a quote as the authenticated user.

    Args:
        quote_id: Quote id (32-char hex)
        request: Action ("vote" or "unvote") and optional username
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification
        credentials: Bearer credentials

    Returns:
        The updated quote
    """
    username = jwt_service.verify_credential(bearer_token(credentials))

    return await cast_vote_use_case.execute(
        CastVoteRequest(
            quote_id=quote_id,
            username=username,
            action=request.action,
            claimed_username=request.username,
        )
    )


@router.put("/updateQuote/{quote_id}", response_model=UpdateQuoteResponse)
async def update_quote(
    quote_id: str,
    request: UpdateQuoteAPIRequest,
    update_quote_use_case: FromDishka[UpdateQuoteUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UpdateQuoteResponse:
    """Replace the text of a quote that has no votes.

    Args:
        quote_id: Quote id (32-char hex)
        request: Replacement text
        update_quote_use_case: Update quote use case from DI
        jwt_service: JWT service for token verification
        credentials: Bearer credentials

    Returns:
        The updated quote
    """
    jwt_service.verify_credential(bearer_token(credentials))

    return await update_quote_use_case.execute(
        UpdateQuoteRequest(quote_id=quote_id, text=request.text)
    )
