from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Column:
    id: str
    label: str


# Display order of the table
COLUMNS: Tuple[Column, ...] = (
    Column("name", "Name"),
    Column("native", "Native"),
    Column("capital", "Capital"),
    Column("languages", "Languages"),
    Column("currency", "Currency"),
)

COLUMN_IDS: Tuple[str, ...] = tuple(c.id for c in COLUMNS)


@dataclass(frozen=True)
class Language:
    code: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Language:
        return cls(code=data.get("code") or "", name=data.get("name") or "")

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "name": self.name}


@dataclass(frozen=True)
class Country:
    """
    One record of the GraphQL `countries` list.

    Fields:

    - name / native / emoji: always present upstream
    - capital / currency: optional, None when the service omits them
    - languages: spoken languages, possibly empty

    There is no natural key; the table uses list position.
    """

    name: str
    native: str
    capital: Optional[str] = None
    currency: Optional[str] = None
    emoji: str = ""
    languages: Tuple[Language, ...] = field(default_factory=tuple)

    @property
    def language_names(self) -> str:
        return ", ".join(lang.name for lang in self.languages)

    def value_for(self, column: str) -> str:
        """Raw string value of a column; missing optional values read as ''."""
        if column == "languages":
            return self.language_names
        value = getattr(self, column, None)
        return value if isinstance(value, str) else ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Country:
        return cls(
            name=data.get("name") or "",
            native=data.get("native") or "",
            # Empty strings are as good as missing for capital/currency
            capital=data.get("capital") or None,
            currency=data.get("currency") or None,
            emoji=data.get("emoji") or "",
            languages=tuple(Language.from_dict(lang) for lang in data.get("languages") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "native": self.native,
            "capital": self.capital,
            "currency": self.currency,
            "emoji": self.emoji,
            "languages": [lang.to_dict() for lang in self.languages],
        }


def countries_from_records(records: List[Dict[str, Any]] | None) -> List[Country]:
    return [Country.from_dict(r) for r in records or []]


def countries_to_records(countries: List[Country]) -> List[Dict[str, Any]]:
    return [c.to_dict() for c in countries]
