from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from ..models import ApiResponse, Client, Supplier
from .base import BaseClient, require_field


class ClientList(BaseModel):
    clients: list[Client] = Field(default_factory=list)


class SupplierList(BaseModel):
    suppliers: list[Supplier] = Field(default_factory=list)


_PARTY_FIELDS = ("name", "contactName", "email", "phone", "address", "isActive")


def _party_body(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: payload[key] for key in _PARTY_FIELDS if key in payload}


@dataclass
class PartiesClient(BaseClient):
    """CRUD for the two party collections, ``/api/clients`` and ``/api/suppliers``."""

    def list_clients(self) -> ApiResponse[ClientList]:
        return self._request("GET", "/api/clients", model=ClientList)

    def get_client(self, client_id: str) -> ApiResponse:
        return self._request("GET", f"/api/clients/{client_id}")

    def create_client(self, payload: dict[str, Any]) -> ApiResponse:
        require_field(payload, "name")
        return self._request("POST", "/api/clients", json_body=_party_body(payload))

    def update_client(self, client_id: str, payload: dict[str, Any]) -> ApiResponse:
        if "name" in payload:
            require_field(payload, "name")
        return self._request("PUT", f"/api/clients/{client_id}", json_body=_party_body(payload))

    def delete_client(self, client_id: str) -> ApiResponse:
        return self._request("DELETE", f"/api/clients/{client_id}")

    def client_generations(self, client_id: str) -> ApiResponse:
        return self._request("GET", f"/api/clients/{client_id}/generations")

    def list_suppliers(self) -> ApiResponse[SupplierList]:
        return self._request("GET", "/api/suppliers", model=SupplierList)

    def get_supplier(self, supplier_id: str) -> ApiResponse:
        return self._request("GET", f"/api/suppliers/{supplier_id}")

    def create_supplier(self, payload: dict[str, Any]) -> ApiResponse:
        require_field(payload, "name")
        return self._request("POST", "/api/suppliers", json_body=_party_body(payload))

    def update_supplier(self, supplier_id: str, payload: dict[str, Any]) -> ApiResponse:
        if "name" in payload:
            require_field(payload, "name")
        return self._request("PUT", f"/api/suppliers/{supplier_id}", json_body=_party_body(payload))

    def delete_supplier(self, supplier_id: str) -> ApiResponse:
        return self._request("DELETE", f"/api/suppliers/{supplier_id}")
