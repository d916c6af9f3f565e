"""API routes for fetching and rendering Helius transactions."""
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import PlainTextResponse
from loguru import logger
from pydantic import ValidationError

from config import settings
from services.helius import helius_service, HeliusError, HeliusNotFoundError
from services.helius_models import HeliusTransaction
from services.renderer import render, TransactionViews
from services.store import transaction_store, StoredTransaction
from .schemas import FetchTransactionRequest, TransactionViewsResponse, HealthResponse

router = APIRouter(prefix="/transactions", tags=["transactions"])
health_router = APIRouter()


class TextView(str, Enum):
    """Views that can be served as plain text."""
    summary = "summary"
    native_diagram = "native-diagram"
    token_diagram = "token-diagram"
    account_changes = "account-changes"


def _views_response(views: TransactionViews, stored: Optional[StoredTransaction] = None) -> TransactionViewsResponse:
    return TransactionViewsResponse(
        signature=stored.signature if stored else None,
        fetched_at=stored.fetched_at if stored else None,
        **asdict(views),
    )


def _resolve_api_key(request: FetchTransactionRequest) -> str:
    if request.api_key is not None:
        key = request.api_key.get_secret_value().strip()
        if key:
            return key
    return settings.helius_api_key


def _require_last() -> StoredTransaction:
    stored = transaction_store.get()
    if stored is None:
        raise HTTPException(status_code=404, detail="No transaction fetched yet")
    return stored


# ============ Fetch ============

@router.post("/fetch", response_model=TransactionViewsResponse)
async def fetch_transaction(request: FetchTransactionRequest):
    """Fetch a transaction from Helius, remember it and return every view."""
    signature = request.signature.strip()
    if not signature:
        logger.warning("Fetch rejected: no signature")
        raise HTTPException(status_code=400, detail="No transaction signature given")

    api_key = _resolve_api_key(request)
    if not api_key:
        logger.warning("Fetch rejected: no Helius API key")
        raise HTTPException(status_code=400, detail="No Helius API key given")

    try:
        transaction = await helius_service.get_transaction(signature, api_key)
    except HeliusNotFoundError:
        logger.info(f"Transaction {signature[:8]}... not found on Helius")
        raise HTTPException(status_code=404, detail="Transaction not found")
    except HeliusError as e:
        logger.error(f"Error fetching transaction {signature[:8]}...: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch transaction")

    stored = transaction_store.set(signature, transaction)
    logger.info(f"Stored transaction {signature[:8]}... ({transaction.type or 'UNKNOWN'})")

    return _views_response(render(transaction), stored)


# ============ Render ============

@router.post("/render", response_model=TransactionViewsResponse)
async def render_transaction(payload: Dict[str, Any] = Body(...)):
    """Render a transaction object supplied by the caller. Nothing is stored."""
    try:
        transaction = HeliusTransaction.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False, include_input=False))

    return _views_response(render(transaction))


# ============ Last result ============

@router.get("/last", response_model=TransactionViewsResponse)
async def get_last_transaction():
    """Views of the most recently fetched transaction."""
    stored = _require_last()
    return _views_response(render(stored.transaction), stored)


@router.get("/last/{view}", response_class=PlainTextResponse)
async def get_last_transaction_view(view: TextView):
    """A single text view of the most recently fetched transaction."""
    stored = _require_last()
    views = render(stored.transaction)

    if view == TextView.summary:
        return views.summary
    if view == TextView.native_diagram:
        return views.native_diagram
    if view == TextView.token_diagram:
        return views.token_diagram
    return views.account_changes


@router.delete("/last")
async def clear_last_transaction():
    """Forget the stored transaction."""
    transaction_store.clear()
    return {"status": "cleared"}


# ============ Health ============

@health_router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        helius_key_configured=bool(settings.helius_api_key),
        has_last_transaction=transaction_store.get() is not None,
    )
