from __future__ import annotations

from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from .exceptions import BackendError

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every backend endpoint."""

    model_config = ConfigDict(extra="allow")

    success: bool = False
    data: Optional[T] = None
    message: str | None = None

    def require_data(self) -> T:
        if not self.success or self.data is None:
            raise BackendError(
                code="UNSUCCESSFUL_RESPONSE",
                message=self.message or "Request failed",
                status_code=200,
                raw_payload=self.model_dump(mode="json"),
            )
        return self.data


class QRType(str, Enum):
    ITEM = "item"
    PET = "pet"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value: object) -> "QRType":
        if isinstance(value, QRType):
            return value
        normalized = str(value or "").strip().lower()
        for member in (cls.ITEM, cls.PET):
            if member.value == normalized:
                return member
        return cls.UNKNOWN


class QRStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    FOUND = "found"


class AdminIdentity(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    email: str
    name: str | None = None
    role: str | None = None
    permissions: List[str] = Field(default_factory=list)


class LoginData(BaseModel):
    user: AdminIdentity
    token: str


class MeData(BaseModel):
    user: AdminIdentity


class QRContact(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    country_code: str | None = Field(default=None, alias="countryCode")
    backup_phone: str | None = Field(default=None, alias="backupPhone")
    message: str | None = None


class QRCodeRecord(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    code: str
    type: QRType
    raw_type: str | None = None
    is_activated: bool = Field(default=False, alias="isActivated")
    details: dict[str, Any] = Field(default_factory=dict)
    contact: QRContact = Field(default_factory=QRContact)
    owner: dict[str, Any] | str | None = None
    status: QRStatus = QRStatus.ACTIVE
    scan_count: int = Field(default=0, ge=0, alias="scanCount")
    last_scanned: str | None = Field(default=None, alias="lastScanned")
    activation_date: str | None = Field(default=None, alias="activationDate")
    qr_image_url: str | None = Field(default=None, alias="qrImageUrl")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")

    @model_validator(mode="before")
    @classmethod
    def _bucket_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and "type" in data and not isinstance(data["type"], QRType):
            data = dict(data)
            data.setdefault("raw_type", data["type"])
            data["type"] = QRType.from_raw(data["type"])
        return data


class QRCodeListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    qr_codes: List[QRCodeRecord] = Field(default_factory=list, alias="qrCodes")
    total_pages: int = Field(default=0, alias="totalPages")
    current_page: int = Field(default=1, alias="currentPage")
    total_count: int = Field(default=0, alias="totalCount")


class QRCodeStats(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    total_qr_codes: int = Field(default=0, alias="totalQRCodes")
    active_qr_codes: int = Field(default=0, alias="activeQRCodes")
    total_users: int = Field(default=0, alias="totalUsers")
    total_scans: int = Field(default=0, alias="totalScans")


class Party(BaseModel):
    """Supplier or client; owns QR codes by association."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str
    contact_name: str | None = Field(default=None, alias="contactName")
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    is_active: bool = Field(default=True, alias="isActive")
    created_at: str | None = Field(default=None, alias="createdAt")


class Supplier(Party):
    pass


class Client(Party):
    pass


class AdminUser(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str | None = None
    email: str
    role: str | None = None
    is_active: bool = Field(default=True, alias="isActive")
    created_at: str | None = Field(default=None, alias="createdAt")
    last_login: str | None = Field(default=None, alias="lastLogin")


class WhiteLabel(BaseModel):
    """Partner brand that receives its own QR batches and admin users."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    email: str | None = None
    logo: str | None = None
    brand_name: str | None = Field(default=None, alias="brandName")
    website: str | None = None
    is_active: bool = Field(default=True, alias="isActive")
    created_at: str | None = Field(default=None, alias="createdAt")
