from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from .models import QRCodeRecord, QRType


class StockSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0)
    activated: int = Field(default=0, ge=0)
    remaining: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_reconciles(self) -> "StockSummary":
        if self.activated > self.total:
            raise ValueError("activated must not exceed total")
        if self.activated + self.remaining != self.total:
            raise ValueError("activated + remaining must equal total")
        return self

    @classmethod
    def from_counts(cls, total: int, activated: int) -> "StockSummary":
        return cls(total=total, activated=activated, remaining=total - activated)

    def __add__(self, other: "StockSummary") -> "StockSummary":
        return StockSummary.from_counts(self.total + other.total, self.activated + other.activated)


class StockBalance(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: StockSummary = Field(default_factory=StockSummary)
    stock: dict[QRType, StockSummary] = Field(default_factory=dict)


class GenerationBatch(BaseModel):
    """One QR generation run allocated to a client."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    quantity: int = Field(default=0, ge=0)
    mode: str | None = None
    type: str | None = None
    qr_codes: list[QRCodeRecord] = Field(default_factory=list, alias="qrCodes")
    created_at: str | None = Field(default=None, alias="createdAt")

    def summary(self) -> StockSummary:
        activated = sum(1 for record in self.qr_codes if record.is_activated)
        total = len(self.qr_codes) or self.quantity
        return StockSummary.from_counts(total, activated)


class PartyStockReport(BaseModel):
    party_id: str
    balance: StockBalance
    qr_codes: list[QRCodeRecord] = Field(default_factory=list)
    batches: list[GenerationBatch] = Field(default_factory=list)
    backend_summary: dict[str, Any] | None = None
