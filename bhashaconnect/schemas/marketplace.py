import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field

from bhashaconnect.services.pagination import Pagination


_EMAIL_RE = re.compile(r"[^\s,;/]+@[^\s,;/]+\.[^\s,;/]+")
_PHONE_RE = re.compile(r"\+?\d[\d\s\-()]{3,}\d")


def split_contact(contact: str) -> tuple[Optional[str], Optional[str]]:
    """Pull the first email address and the first phone number out of a free-form contact string."""

    value = contact or ""
    email = _EMAIL_RE.search(value)
    # Drop the email before looking for digits so addresses like a1234@x.in do not read as phones.
    remainder = _EMAIL_RE.sub(" ", value)
    phone = next(
        (m.group(0).strip() for m in _PHONE_RE.finditer(remainder) if sum(ch.isdigit() for ch in m.group(0)) >= 5),
        None,
    )
    return (email.group(0) if email else None), phone


class MarketplaceEntryRead(BaseModel):
    id: int
    business_name: str
    owner_name: str
    product_service: str
    contact: str
    language: str
    location: Optional[str] = None
    description: Optional[str] = None
    created_by: int
    created_by_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def contact_email(self) -> Optional[str]:
        return split_contact(self.contact)[0]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def contact_phone(self) -> Optional[str]:
        return split_contact(self.contact)[1]


class MarketplaceEntryItem(BaseModel):
    entry: MarketplaceEntryRead


class MarketplaceEntryList(BaseModel):
    marketplace: list[MarketplaceEntryRead]
    pagination: Pagination


class MarketplaceSearchResults(BaseModel):
    results: list[MarketplaceEntryRead]
    pagination: Pagination
