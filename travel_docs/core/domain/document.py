"""
DocumentContent — output of the document renderers

An ordered, immutable sequence of sections handed to the print surface.
Four section shapes cover every printed document:

- ClauseSection  : heading + paragraphs of running text (contract clauses,
                   legal rules, itinerary)
- FieldSection   : label/value pairs laid out as boxes
- ChoiceSection  : checkbox options with the selected ones marked
- TableSection   : column headers + rows (a row may be highlighted)

Built fresh per generation call; equal inputs give equal content.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class DocumentKind(str, Enum):
    """Printable documents."""

    CONTRACT = "contract"
    PASSENGER_MANIFEST = "passenger_manifest"
    DEBIT_AUTHORIZATION = "debit_authorization"
    BIRTHDAY_REPORT = "birthday_report"
    HOTEL_REPORT = "hotel_report"


# =============================================================================
# SECTIONS
# =============================================================================


@dataclass(frozen=True)
class ClauseSection:
    key: str
    heading: str
    paragraphs: tuple[str, ...]


@dataclass(frozen=True)
class FieldEntry:
    label: str
    value: str


@dataclass(frozen=True)
class FieldSection:
    key: str
    heading: str
    fields: tuple[FieldEntry, ...]

    def value_of(self, label: str) -> Optional[str]:
        """Value of the first field with this label."""
        for entry in self.fields:
            if entry.label == label:
                return entry.value
        return None


@dataclass(frozen=True)
class ChoiceOption:
    label: str
    selected: bool


@dataclass(frozen=True)
class ChoiceSection:
    key: str
    heading: str
    options: tuple[ChoiceOption, ...]

    @property
    def selected_labels(self) -> tuple[str, ...]:
        return tuple(option.label for option in self.options if option.selected)


@dataclass(frozen=True)
class TableRow:
    cells: tuple[str, ...]
    highlighted: bool = False


@dataclass(frozen=True)
class TableSection:
    key: str
    heading: str
    columns: tuple[str, ...]
    rows: tuple[TableRow, ...]
    footer: Optional[TableRow] = None


Section = Union[ClauseSection, FieldSection, ChoiceSection, TableSection]


# =============================================================================
# DOCUMENT
# =============================================================================


@dataclass(frozen=True)
class DocumentContent:
    """
    Rendered document.

    Attributes:
        kind: Which document this is
        title: Title line printed at the top
        sections: Sections in print order
    """

    kind: DocumentKind
    title: str
    sections: tuple[Section, ...] = field(default_factory=tuple)

    def section(self, key: str) -> Section:
        """
        Section by key.

        Raises:
            KeyError: If no section has this key
        """
        for section in self.sections:
            if section.key == key:
                return section
        raise KeyError(key)

    @property
    def section_keys(self) -> tuple[str, ...]:
        return tuple(section.key for section in self.sections)

    def as_dict(self) -> dict[str, Any]:
        """Plain-data form (JSON-serializable) for handing to a print service."""
        return {
            "kind": self.kind.value,
            "title": self.title,
            "sections": [_section_as_dict(section) for section in self.sections],
        }


def _section_as_dict(section: Section) -> dict[str, Any]:
    base: dict[str, Any] = {"key": section.key, "heading": section.heading}
    if isinstance(section, ClauseSection):
        base["type"] = "clause"
        base["paragraphs"] = list(section.paragraphs)
    elif isinstance(section, FieldSection):
        base["type"] = "fields"
        base["fields"] = [{"label": f.label, "value": f.value} for f in section.fields]
    elif isinstance(section, ChoiceSection):
        base["type"] = "choice"
        base["options"] = [{"label": o.label, "selected": o.selected} for o in section.options]
    else:
        base["type"] = "table"
        base["columns"] = list(section.columns)
        base["rows"] = [
            {"cells": list(row.cells), "highlighted": row.highlighted} for row in section.rows
        ]
        base["footer"] = list(section.footer.cells) if section.footer else None
    return base
