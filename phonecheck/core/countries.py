"""Country registry used to populate the dialing-prefix selector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class CountryEntry:
    """One selectable country."""

    name: str
    iso_code: str
    dialing_prefix: str
    flag: str

    @property
    def option_label(self) -> str:
        """Text shown in the selector, e.g. ``🇮🇳 India (+91)``."""
        return f"{self.flag} {self.name} ({self.dialing_prefix})"


# Display order of the selector
COUNTRIES: Tuple[CountryEntry, ...] = (
    CountryEntry("United States", "US", "+1", "🇺🇸"),
    CountryEntry("United Kingdom", "GB", "+44", "🇬🇧"),
    CountryEntry("India", "IN", "+91", "🇮🇳"),
    CountryEntry("Canada", "CA", "+1", "🇨🇦"),
    CountryEntry("Australia", "AU", "+61", "🇦🇺"),
    CountryEntry("Germany", "DE", "+49", "🇩🇪"),
    CountryEntry("France", "FR", "+33", "🇫🇷"),
    CountryEntry("Japan", "JP", "+81", "🇯🇵"),
    CountryEntry("Brazil", "BR", "+55", "🇧🇷"),
    CountryEntry("Mexico", "MX", "+52", "🇲🇽"),
)


def get_country(iso_code: str) -> Optional[CountryEntry]:
    """Find a country by ISO code (case-insensitive)."""
    code = iso_code.strip().upper()
    for country in COUNTRIES:
        if country.iso_code == code:
            return country
    return None


def selector_options() -> List[dict]:
    """Options for a select control: value is the prefix, code is metadata.

    Several countries share a prefix (US and CA are both +1), so front ends
    that key widgets by value must use the ISO code instead.
    """
    return [
        {"value": c.dialing_prefix, "label": c.option_label, "code": c.iso_code}
        for c in COUNTRIES
    ]
