"""Render a Helius transaction into display views.

Every view is computed independently from the transaction; nothing here
touches the network or the stored last result.
"""
import json
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Union

from .helius_models import (
    LAMPORTS_PER_SOL,
    AccountData,
    HeliusTransaction,
    NativeTransfer,
    TokenTransfer,
)


NONE_LABEL = "none"
ADDRESS_LENGTH = 4
FEE_PAYER_LENGTH = 8
SOL_DECIMALS = 4


@dataclass
class EventBlock:
    """One entry of the transaction's events mapping."""
    name: str
    json_text: str


@dataclass
class TransactionViews:
    """All views of one transaction."""
    summary: str
    tree: Dict[str, Any]
    events: List[EventBlock] = field(default_factory=list)
    native_diagram: str = ""
    token_diagram: str = ""
    account_changes: str = ""


def shorten(value: str, length: int) -> str:
    """Return first and last `length` characters joined by '...'.

    Strings of at most 2 * length characters are returned as-is, so the two
    halves never overlap.
    """
    if len(value) <= 2 * length:
        return value
    return f"{value[:length]}...{value[-length:]}"


def lamports_to_sol(lamports: int) -> float:
    return round(lamports / LAMPORTS_PER_SOL, SOL_DECIMALS)


def render_summary(tx: HeliusTransaction) -> str:
    """Markdown summary of source, type, description and fee payer."""
    lines = [
        "### Transaction summary",
        "",
        f"- **Source:** {tx.source}",
        f"- **Type:** {tx.type}",
        f"- **Description:** {tx.description}",
        f"- **Fee payer:** {shorten(tx.fee_payer, FEE_PAYER_LENGTH)}",
    ]
    return "\n".join(lines)


def render_tree(tx: HeliusTransaction) -> Dict[str, Any]:
    return tx.to_tree()


def render_events(tx: HeliusTransaction) -> List[EventBlock]:
    """Pretty-print each event payload under its name, in mapping order."""
    return [
        EventBlock(name=name, json_text=json.dumps(payload, indent=2))
        for name, payload in tx.events.items()
    ]


# Diagram helpers

def _node_id(address: str) -> str:
    # Mermaid ids must be plain identifiers; base58 already is
    if not address:
        return NONE_LABEL
    return re.sub(r"[^0-9A-Za-z_]", "_", address)


def _node(address: str) -> str:
    label = shorten(address, ADDRESS_LENGTH) if address else NONE_LABEL
    return f'{_node_id(address)}["{label}"]'


def _edge(from_address: str, to_address: str, label: str) -> str:
    return f'    {_node(from_address)} -->|"{label}"| {_node(to_address)}'


def _flowchart(edges: List[str]) -> str:
    return "\n".join(["flowchart LR"] + edges)


def _native_edge(transfer: NativeTransfer) -> str:
    sol = lamports_to_sol(transfer.amount)
    return _edge(transfer.from_user_account, transfer.to_user_account, f"{sol} SOL")


def format_token_amount(amount: Union[int, float]) -> str:
    """Plain decimal notation, never exponent form (1e-05 -> 0.00001)."""
    if isinstance(amount, int):
        return str(amount)
    return format(Decimal(repr(amount)), "f")


def _token_edge(transfer: TokenTransfer) -> str:
    label = f"{format_token_amount(transfer.token_amount)} {shorten(transfer.mint, ADDRESS_LENGTH)}"
    return _edge(transfer.from_user_account, transfer.to_user_account, label)


def render_native_diagram(tx: HeliusTransaction) -> str:
    """Mermaid flowchart with one edge per SOL transfer of positive amount."""
    edges = [_native_edge(t) for t in tx.native_transfers if t.amount > 0]
    return _flowchart(edges)


def render_token_diagram(tx: HeliusTransaction) -> str:
    """Mermaid flowchart with one edge per token transfer (no amount filter)."""
    edges = [_token_edge(t) for t in tx.token_transfers]
    return _flowchart(edges)


def _format_change(account: AccountData) -> str:
    sol = lamports_to_sol(account.native_balance_change)
    sign = "+" if sol > 0 else ""
    return f"{sign}{sol} SOL"


def render_account_changes(tx: HeliusTransaction) -> str:
    """Markdown table of accounts whose SOL balance changed."""
    changed = [a for a in tx.account_data if a.native_balance_change != 0]
    if not changed:
        return "_No native balance changes_"

    lines = ["| Account | Change |", "| --- | --- |"]
    for account in changed:
        label = shorten(account.account, FEE_PAYER_LENGTH) if account.account else NONE_LABEL
        lines.append(f"| {label} | {_format_change(account)} |")
    return "\n".join(lines)


def render(tx: Union[HeliusTransaction, Dict[str, Any]]) -> TransactionViews:
    """Build every view of a transaction."""
    if not isinstance(tx, HeliusTransaction):
        tx = HeliusTransaction.model_validate(tx)

    return TransactionViews(
        summary=render_summary(tx),
        tree=render_tree(tx),
        events=render_events(tx),
        native_diagram=render_native_diagram(tx),
        token_diagram=render_token_diagram(tx),
        account_changes=render_account_changes(tx),
    )
