from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

NUMBER_FIELD = "number"
COUNTRY_FIELD = "country"

MISSING_COUNTRY_MESSAGE = "Please select a country code."
MISSING_NUMBER_MESSAGE = "Please enter a phone number."


def _present(value: Any) -> bool:
    """Truthiness of a decoded JSON value; objects and arrays count even when empty."""
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


def _text(value: Any) -> Optional[str]:
    """Present scalar -> ``str``; absent -> None."""
    if not _present(value):
        return None
    return value if isinstance(value, str) else str(value)


class InputError(ValueError):
    """Form input rejected before any provider call.

    Attributes:
        message: User-facing notice.
        field: Form field the notice refers to (``country`` or ``number``).
    """

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationFailed(Exception):
    """Provider call failed (HTTP status, transport or malformed body)."""


@dataclass(frozen=True)
class ValidationRequest:
    """A single submission: the dialing prefix glued to the raw digits."""

    full_number: str


@dataclass
class CountryInfo:
    """Country block of a provider response."""

    name: Optional[str] = None
    code: Optional[str] = None
    prefix: Optional[str] = None


@dataclass
class NumberFormat:
    """Format block of a provider response."""

    international: Optional[str] = None
    local: Optional[str] = None


@dataclass
class ValidationResult:
    """Parsed provider response.

    Attributes:
        valid: Whether the provider considers the number valid.
        country: Country block; present whenever the provider sent one.
        location: Region/city if available.
        carrier: Carrier name if available.
        type: Line type as reported (mobile, landline, ...).
        format: Formatted variants of the number.
        phone: Number as echoed by the provider.
        extra: Remaining provider-specific fields.
    """

    valid: bool
    country: Optional[CountryInfo] = None
    location: Optional[str] = None
    carrier: Optional[str] = None
    type: Optional[str] = None
    format: Optional[NumberFormat] = None
    phone: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ValidationResult":
        """Build a result from a decoded JSON object, tolerating any shape."""

        country = payload.get("country")
        if isinstance(country, dict):
            country_info: Optional[CountryInfo] = CountryInfo(
                name=_text(country.get("name")),
                code=_text(country.get("code")),
                prefix=_text(country.get("prefix")),
            )
        elif _present(country):
            # e.g. a bare "IN": no name to show, but the country is not missing
            country_info = CountryInfo()
        else:
            country_info = None

        number_format = payload.get("format")
        known = {"valid", "country", "location", "carrier", "type", "format", "phone"}

        return cls(
            valid=_present(payload.get("valid")),
            country=country_info,
            location=_text(payload.get("location")),
            carrier=_text(payload.get("carrier")),
            type=_text(payload.get("type")),
            format=NumberFormat(
                international=_text(number_format.get("international")),
                local=_text(number_format.get("local")),
            ) if isinstance(number_format, dict) else None,
            phone=_text(payload.get("phone")),
            extra={k: v for k, v in payload.items() if k not in known},
        )


def build_request(prefix: Optional[str], raw_number: Optional[str]) -> ValidationRequest:
    """Check form preconditions and build the request.

    The digits are not inspected: the provider decides what is valid.

    Raises:
        InputError: No country selected or the number is blank.
    """

    prefix = (prefix or "").strip()
    number = (raw_number or "").strip()

    if not prefix:
        raise InputError(MISSING_COUNTRY_MESSAGE, COUNTRY_FIELD)
    if not number:
        raise InputError(MISSING_NUMBER_MESSAGE, NUMBER_FIELD)

    return ValidationRequest(full_number=prefix + number)


class PhoneValidator(ABC):
    """Abstract base class for remote phone validators."""

    source_name = "base"

    @abstractmethod
    def lookup(self, request: ValidationRequest) -> ValidationResult:
        """Send one request to the provider and parse the answer.

        Raises:
            ValidationFailed: On any HTTP, transport or decoding problem.
        """
        raise NotImplementedError

    def validate(self, prefix: Optional[str], raw_number: Optional[str]) -> ValidationResult:
        """Validate ``prefix + raw_number``; input errors skip the network."""

        return self.lookup(build_request(prefix, raw_number))
