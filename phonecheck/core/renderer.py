"""Maps a provider result onto the labeled rows of the results panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..api_manager.base import ValidationResult

NO_DATA_MESSAGE = "No additional data available"


@dataclass(frozen=True)
class ResultRow:
    """One labeled value in the results panel.

    ``style`` is an extra CSS class ("valid"/"invalid" on the status row).
    """

    label: str
    value: str
    style: str = ""


def capitalize_first(text: str) -> str:
    """``"MOBILE"`` -> ``"Mobile"``."""
    return text[:1].upper() + text[1:].lower()


def render(result: ValidationResult, echoed_number: str) -> List[ResultRow]:
    """Build the ordered result rows; rows whose field is absent are skipped."""
    rows = [
        ResultRow(
            "Validation Status",
            "Valid" if result.valid else "Invalid",
            "valid" if result.valid else "invalid",
        ),
        ResultRow("Phone Number", echoed_number),
    ]

    if result.country and result.country.name:
        rows.append(ResultRow("Country", result.country.name))

    if result.location:
        rows.append(ResultRow("Location", result.location))

    if result.carrier:
        rows.append(ResultRow("Carrier", result.carrier))

    if result.type:
        rows.append(ResultRow("Line Type", capitalize_first(result.type)))

    if result.format and result.format.international:
        rows.append(ResultRow("International Format", result.format.international))

    # Only country/carrier/type count here; location and format do not.
    if not result.country and not result.carrier and not result.type:
        rows.append(ResultRow("Additional Info", NO_DATA_MESSAGE))

    return rows
