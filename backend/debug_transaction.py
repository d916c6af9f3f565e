"""
Debug script to fetch one transaction from Helius and print every view.
Usage: python debug_transaction.py <signature> [api_key]

The API key defaults to HELIUS_API_KEY from the environment or .env.
"""
import asyncio
import json
import sys

from config import settings
from services.helius import HeliusService, HeliusError
from services.renderer import render


def print_views(signature: str, api_key: str) -> int:
    """Fetch and print all views. Returns a process exit code."""
    if not signature:
        print("❌ No transaction signature given")
        return 1
    if not api_key:
        print("❌ No Helius API key given")
        return 1

    try:
        transaction = asyncio.run(HeliusService().get_transaction(signature, api_key))
    except HeliusError as e:
        print(f"❌ Failed to fetch transaction: {e}")
        return 1

    views = render(transaction)

    print("=" * 80)
    print(views.summary)

    print("\n🌳 Raw tree:")
    print(json.dumps(views.tree, indent=2))

    print(f"\n📣 Events ({len(views.events)}):")
    for event in views.events:
        print(f"\n#### {event.name}")
        print(event.json_text)

    print("\n💸 Native transfers:")
    print(views.native_diagram)

    print("\n🪙 Token transfers:")
    print(views.token_diagram)

    print("\n📊 Balance changes:")
    print(views.account_changes)
    print("=" * 80)
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python debug_transaction.py <signature> [api_key]")
        sys.exit(1)

    signature = sys.argv[1].strip()
    api_key = sys.argv[2].strip() if len(sys.argv) > 2 else settings.helius_api_key
    sys.exit(print_views(signature, api_key))
