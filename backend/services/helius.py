"""Helius API service for fetching enhanced Solana transactions."""
import asyncio
from typing import Any, Optional
import aiohttp
from loguru import logger
from pydantic import ValidationError

from config import settings
from .helius_models import HeliusTransaction


class HeliusError(Exception):
    """Base error for Helius requests."""


class HeliusNetworkError(HeliusError):
    """Transport failure or non-200 response."""


class HeliusDecodeError(HeliusError):
    """Response body could not be read as an enhanced transaction."""


class HeliusNotFoundError(HeliusError):
    """Helius returned no transaction for the signature."""


def _redact(message: str, api_key: str) -> str:
    if api_key:
        message = message.replace(api_key, "***")
    return message


def parse_transactions_response(data: Any) -> HeliusTransaction:
    """
    Validate a /v0/transactions response body and return its first element.

    Raises:
        HeliusDecodeError: body is not a list of transaction objects
        HeliusNotFoundError: body is an empty list
    """
    if not isinstance(data, list):
        raise HeliusDecodeError(f"Expected a JSON array, got {type(data).__name__}")
    if not data:
        raise HeliusNotFoundError("Helius returned an empty transaction list")

    first = data[0]
    if not isinstance(first, dict):
        raise HeliusDecodeError(f"Expected a transaction object, got {type(first).__name__}")

    try:
        return HeliusTransaction.model_validate(first)
    except ValidationError as e:
        raise HeliusDecodeError(f"Invalid transaction payload: {e.error_count()} error(s)") from e


class HeliusService:
    """Service for interacting with the Helius enhanced transactions API."""

    def __init__(self, base_url: Optional[str] = None, timeout_seconds: Optional[float] = None):
        self.base_url = base_url or settings.helius_base_url
        self.timeout_seconds = timeout_seconds or settings.helius_timeout_seconds

    async def get_transaction(self, signature: str, api_key: str) -> HeliusTransaction:
        """
        Fetch one enhanced transaction from Helius.

        Args:
            signature: Transaction signature
            api_key: Helius API key, sent as the api-key query parameter

        Returns:
            The first transaction of the response array

        Raises:
            HeliusNetworkError: request failed or returned a non-200 status
            HeliusDecodeError: response was not a valid transaction array
            HeliusNotFoundError: response array was empty
        """
        if not signature:
            raise ValueError("signature must be non-empty")
        if not api_key:
            raise ValueError("api_key must be non-empty")

        url = f"{self.base_url}/v0/transactions"
        params = {"api-key": api_key}
        payload = {"transactions": [signature]}

        logger.info(f"Fetching transaction {signature[:8]}... from Helius")

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(url, params=params, json=payload) as response:
                    if response.status != 200:
                        text = await response.text()
                        raise HeliusNetworkError(
                            _redact(f"Helius API error: {response.status} - {text[:200]}", api_key)
                        )

                    try:
                        data = await response.json(content_type=None)
                    except ValueError as e:
                        raise HeliusDecodeError("Helius response is not valid JSON") from e

        except asyncio.TimeoutError as e:
            raise HeliusNetworkError(f"Helius request timed out after {self.timeout_seconds}s") from e
        except aiohttp.ClientError as e:
            raise HeliusNetworkError(_redact(f"Helius request failed: {e}", api_key)) from e

        transaction = parse_transactions_response(data)
        logger.debug(f"Fetched {transaction.type or 'UNKNOWN'} transaction {signature[:8]}...")
        return transaction


# Singleton instance
helius_service = HeliusService()
