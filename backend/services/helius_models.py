"""Pydantic models for Helius enhanced transaction responses."""
import copy
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator


# 1 SOL = 1e9 lamports
LAMPORTS_PER_SOL = 1_000_000_000


class _HeliusModel(BaseModel):
    """Base for Helius payload models.

    Fields use the API's camelCase names as aliases. Unknown fields are kept
    so the raw tree view shows everything Helius returned. A JSON null for a
    string or collection field is read as the field's empty default; the
    tree view still shows the null.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value, info):
        if value is not None:
            return value
        field = cls.model_fields[info.field_name]
        if field.default_factory is not None:
            return field.default_factory()
        return field.default


class NativeTransfer(_HeliusModel):
    """SOL transfer between two accounts, amount in lamports."""
    from_user_account: str = Field("", alias="fromUserAccount")
    to_user_account: str = Field("", alias="toUserAccount")
    amount: int = 0


class TokenTransfer(_HeliusModel):
    """SPL token transfer. tokenAmount is already decimal-adjusted by Helius."""
    from_user_account: str = Field("", alias="fromUserAccount")
    to_user_account: str = Field("", alias="toUserAccount")
    token_amount: Union[int, float] = Field(0, alias="tokenAmount")
    mint: str = ""


class AccountData(_HeliusModel):
    """Per-account balance change."""
    account: str = ""
    native_balance_change: int = Field(0, alias="nativeBalanceChange")
    token_balance_changes: List[Dict[str, Any]] = Field(default_factory=list, alias="tokenBalanceChanges")


class HeliusTransaction(_HeliusModel):
    """Enhanced parsed transaction as returned by /v0/transactions."""
    signature: str = ""
    source: str = ""
    type: str = ""
    description: str = ""
    fee_payer: str = Field("", alias="feePayer")
    fee: int = 0
    timestamp: int = 0
    events: Dict[str, Any] = Field(default_factory=dict)
    native_transfers: List[NativeTransfer] = Field(default_factory=list, alias="nativeTransfers")
    token_transfers: List[TokenTransfer] = Field(default_factory=list, alias="tokenTransfers")
    account_data: List[AccountData] = Field(default_factory=list, alias="accountData")

    # Payload exactly as received, nulls included
    _raw: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_raw(cls, data, handler):
        transaction = handler(data)
        if isinstance(data, dict):
            transaction._raw = copy.deepcopy(data)
        return transaction

    def to_tree(self) -> Dict[str, Any]:
        """Structural dump of the payload as Helius sent it."""
        if self._raw is not None:
            return copy.deepcopy(self._raw)
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
