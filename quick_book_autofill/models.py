"""Fill request and result models"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from quick_book_autofill.errors import InvalidFillRequest

GENDERS = ("male", "female", "transgender")
MOBILE_PATTERN = re.compile(r"^\d{10}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _text(data: Dict[str, Any], key: str) -> str:
    """Stripped string value of data[key]; missing or null reads as empty"""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidFillRequest(f"{key} must be text, got {value!r}")
    return value.strip()


def _mapping(data: Any, what: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidFillRequest(f"{what} must be an object")
    return data


class PaymentMethod(Enum):
    """Payment options offered on the passenger page"""

    CARDS = "Cards"
    UPI = "UPI"

    @property
    def label(self) -> str:
        if self is PaymentMethod.UPI:
            return "BHIM/UPI"
        return "Cards/Net Banking/Wallets"

    @classmethod
    def parse(cls, raw: str) -> "PaymentMethod":
        if not isinstance(raw, str):
            raise InvalidFillRequest(f"Unknown payment method: {raw!r}")
        key = raw.strip().lower()
        if key in ("upi", "bhim/upi", "bhim upi"):
            return cls.UPI
        if key in ("cards", "card", "cards/net banking/wallets"):
            return cls.CARDS
        raise InvalidFillRequest(f"Unknown payment method: {raw!r}")


@dataclass
class PassengerRecord:
    name: str
    age: int
    gender: str
    berth: Optional[str] = None

    def validate(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidFillRequest("Passenger name is required")
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise InvalidFillRequest(f"Passenger age must be a whole number: {self.age!r}")
        if not 1 <= self.age <= 120:
            raise InvalidFillRequest(f"Passenger age out of range (1-120): {self.age}")
        if not isinstance(self.gender, str) or self.gender.strip().lower() not in GENDERS:
            raise InvalidFillRequest(f"Unknown passenger gender: {self.gender!r}")
        if self.berth is not None and not isinstance(self.berth, str):
            raise InvalidFillRequest(f"Berth preference must be text: {self.berth!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PassengerRecord":
        if not isinstance(data, dict):
            raise InvalidFillRequest("Each passenger must be an object")
        age = data.get("age")
        if isinstance(age, str) and age.strip().isdigit():
            age = int(age.strip())
        record = cls(
            name=_text(data, "name"),
            age=age,
            gender=_text(data, "gender").lower(),
            berth=_text(data, "berth") or None,
        )
        record.validate()
        return record


@dataclass
class ContactInfo:
    mobile: str
    email: str

    def validate(self) -> None:
        if not self.mobile or not self.email:
            raise InvalidFillRequest("Both mobile number and email are required")
        if not isinstance(self.mobile, str) or not isinstance(self.email, str):
            raise InvalidFillRequest("Mobile number and email must be text")
        if not MOBILE_PATTERN.match(self.mobile):
            raise InvalidFillRequest("Mobile number must be 10 digits")
        if not EMAIL_PATTERN.match(self.email):
            raise InvalidFillRequest(f"Invalid email address: {self.email!r}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ContactInfo":
        data = _mapping(data, "Contact")
        contact = cls(
            mobile=_text(data, "mobile"),
            email=_text(data, "email"),
        )
        contact.validate()
        return contact


@dataclass
class PaymentInfo:
    method: PaymentMethod
    upi_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["PaymentInfo"]:
        """An empty mapping (nothing saved) means no payment step."""
        data = _mapping(data, "Payment")
        if not data.get("method"):
            return None
        method = PaymentMethod.parse(data["method"])
        upi_id = None
        if method is PaymentMethod.UPI:
            upi_id = _text(data, "upiId") or _text(data, "upi_id") or None
        return cls(method=method, upi_id=upi_id)


@dataclass
class FillRequest:
    passengers: List[PassengerRecord]
    contact: ContactInfo
    payment: Optional[PaymentInfo] = None

    def validate(self) -> None:
        if not self.passengers:
            raise InvalidFillRequest("At least one passenger is required")
        for passenger in self.passengers:
            passenger.validate()
        self.contact.validate()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FillRequest":
        if not isinstance(data, dict):
            raise InvalidFillRequest("Fill request must be an object")
        passengers = data.get("passengers") or []
        if not isinstance(passengers, list) or not passengers:
            raise InvalidFillRequest("At least one passenger is required")
        request = cls(
            passengers=[PassengerRecord.from_dict(p) for p in passengers],
            contact=ContactInfo.from_dict(data.get("contact")),
            payment=PaymentInfo.from_dict(data.get("payment")),
        )
        request.validate()
        return request


@dataclass
class FillResult:
    """Outcome of one fill; details is the full step log in execution order."""

    success: bool
    message: str
    details: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "details": list(self.details),
        }
