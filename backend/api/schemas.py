"""Pydantic schemas for API request/response models."""
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, SecretStr


# Fetch schemas
class FetchTransactionRequest(BaseModel):
    """Request to fetch and render one transaction."""
    signature: str = Field("", description="Transaction signature")
    # Falls back to HELIUS_API_KEY when omitted
    api_key: Optional[SecretStr] = Field(None, description="Helius API key")


# View schemas
class EventBlockResponse(BaseModel):
    """One event payload, pretty-printed."""
    name: str
    json_text: str


class TransactionViewsResponse(BaseModel):
    """Every rendered view of a transaction."""
    signature: Optional[str] = None
    fetched_at: Optional[datetime] = None

    summary: str
    tree: Dict[str, Any]
    events: List[EventBlockResponse]
    native_diagram: str
    token_diagram: str
    account_changes: str


class HealthResponse(BaseModel):
    """Service health and configuration status."""
    status: str
    helius_key_configured: bool
    has_last_transaction: bool
