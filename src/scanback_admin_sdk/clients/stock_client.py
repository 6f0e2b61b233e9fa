from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..models import Client, QRCodeRecord
from ..models_stock import GenerationBatch, PartyStockReport
from ..stock import compute_stock_summary
from .base import BaseClient


class StockBalancePayload(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    summary: dict[str, Any] | None = None
    qr_codes: list[QRCodeRecord] = Field(default_factory=list, alias="qrCodes")
    batches: list[GenerationBatch] = Field(default_factory=list)

    def records(self) -> list[QRCodeRecord]:
        """Top-level records, or the batch records when the top level is absent.

        Batch records are deduplicated by ``code``; the first occurrence wins.
        """
        if self.qr_codes:
            return list(self.qr_codes)
        seen: set[str] = set()
        records: list[QRCodeRecord] = []
        for batch in self.batches:
            for record in batch.qr_codes:
                if record.code in seen:
                    continue
                seen.add(record.code)
                records.append(record)
        return records


class ClientStockEntry(StockBalancePayload):
    client: Client | None = None
    client_id: str | None = Field(default=None, validation_alias=AliasChoices("clientId", "client_id"))

    def party_id(self) -> str:
        if self.client_id:
            return self.client_id
        if self.client is not None and self.client.id:
            return self.client.id
        return ""


class AllClientsStockPayload(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    clients: list[ClientStockEntry] = Field(default_factory=list)


def build_report(party_id: str, payload: StockBalancePayload) -> PartyStockReport:
    records = payload.records()
    return PartyStockReport(
        party_id=party_id,
        balance=compute_stock_summary(records),
        qr_codes=records,
        batches=payload.batches,
        backend_summary=payload.summary,
    )


@dataclass
class StockClient(BaseClient):
    """Fetches a party's assigned QR codes and recomputes the balance locally.

    The backend's own ``summary``/``stock`` blocks are kept only for
    reference on the report; counts always come from the records.
    """

    def supplier_stock_balance(self, supplier_id: str) -> PartyStockReport:
        return self._stock_report(supplier_id, f"/api/suppliers/{supplier_id}/stock-balance")

    def client_stock_balance(self, client_id: str) -> PartyStockReport:
        return self._stock_report(client_id, f"/api/clients/{client_id}/stock-balance")

    def all_clients_stock_balance(self) -> list[PartyStockReport]:
        response = self._request("GET", "/api/clients/stock-balance", model=AllClientsStockPayload)
        payload = response.require_data()
        return [build_report(entry.party_id(), entry) for entry in payload.clients]

    def _stock_report(self, party_id: str, path: str) -> PartyStockReport:
        response = self._request("GET", path, model=StockBalancePayload)
        return build_report(party_id, response.require_data())
