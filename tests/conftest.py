"""
Pytest fixtures for TxLens tests. Network calls are replaced by fakes.
"""

from __future__ import annotations

import copy

import pytest

FEE_PAYER = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
RECIPIENT = "7F1WzVNQ1Qpurqxxdyv3UrFQR3uoNepULVW9A4bAJ5nZ"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
SIGNATURE = "5VazcsgRgCKQ2FbZURGhs2yTwAbKTLGjQazHoS16hcHLeigHfZ5bmPTx9T88KEpSjqjbnTijtTd32D82cf6WoBxE"

SAMPLE_TRANSACTION = {
    "signature": SIGNATURE,
    "source": "SYSTEM_PROGRAM",
    "type": "TRANSFER",
    "description": "9QCfNuQu transferred 1 SOL to 7F1WzVNQ.",
    "feePayer": FEE_PAYER,
    "fee": 5000,
    "timestamp": 1700000000,
    "slot": 230000000,
    "events": {
        "swap": {"nativeInput": {"account": FEE_PAYER, "amount": "1000000000"}, "tokenOutputs": []},
        "compressed": None,
    },
    "nativeTransfers": [
        {"fromUserAccount": FEE_PAYER, "toUserAccount": RECIPIENT, "amount": 1_000_000_000},
    ],
    "tokenTransfers": [
        {
            "fromUserAccount": FEE_PAYER,
            "toUserAccount": RECIPIENT,
            "tokenAmount": 12.5,
            "mint": USDC_MINT,
            "tokenStandard": "Fungible",
        },
    ],
    "accountData": [
        {"account": FEE_PAYER, "nativeBalanceChange": -1_000_005_000, "tokenBalanceChanges": []},
        {"account": RECIPIENT, "nativeBalanceChange": 1_000_000_000, "tokenBalanceChanges": []},
        {"account": "11111111111111111111111111111111", "nativeBalanceChange": 0, "tokenBalanceChanges": []},
    ],
}


class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside `async with`."""

    def __init__(self, status=200, body=None, text=""):
        self.status = status
        self._body = body
        self._text = text

    async def json(self, content_type="application/json"):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeHelius:
    """Records POST calls and serves a canned response or raises."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(body=[copy.deepcopy(SAMPLE_TRANSACTION)])
        self.error = None

    def session_factory(self, *args, **kwargs):
        fake = self

        class FakeSession:
            async def __aenter__(self):
                return self

            async def __aexit__(self, *exc):
                return False

            def post(self, url, params=None, json=None):
                fake.calls.append({"url": url, "params": params, "json": json})
                if fake.error is not None:
                    raise fake.error
                return fake.response

        return FakeSession()


@pytest.fixture
def sample_transaction():
    return copy.deepcopy(SAMPLE_TRANSACTION)


@pytest.fixture
def fake_helius(monkeypatch):
    """Replace aiohttp.ClientSession used by the Helius service."""
    import services.helius as helius

    fake = FakeHelius()
    monkeypatch.setattr(helius.aiohttp, "ClientSession", fake.session_factory)
    return fake


@pytest.fixture(autouse=True)
def empty_store():
    """Every test starts with no stored transaction."""
    from services.store import transaction_store

    transaction_store.clear()
    yield transaction_store
    transaction_store.clear()


@pytest.fixture
def client():
    """FastAPI TestClient for the app."""
    from fastapi.testclient import TestClient

    from main import app

    return TestClient(app)
