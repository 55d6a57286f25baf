"""
Renderer configuration.

Agency identity (printed in contract parties, debit-form footer and report
footers) and the print conventions shared by every document.
"""

from dataclasses import dataclass, field
from typing import Final

from travel_docs.core.domain.debit import MAX_TRAVELERS

# =============================================================================
# CONSTANTS
# =============================================================================

BLANK_DATE: Final[str] = "___/___/______"
BLANK_TIME: Final[str] = "___:___"
BLANK_TEXT: Final[str] = "____________________"

RESPONSIBLE_MARKER: Final[str] = "(Resp.)"

EMPTY_VALUE: Final[str] = "-"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AgencyProfile:
    """
    Agency identity.

    Every field may be left empty; empty lines are dropped from footers.
    """

    name: str = ""
    tax_number: str = ""  # CNPJ
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    phone: str = ""
    email: str = ""

    @property
    def display_name(self) -> str:
        return self.name or "AGÊNCIA DE VIAGENS"

    def footer_lines(self) -> tuple[str, ...]:
        """Identity block as printed at the bottom of the debit form."""
        location = " – ".join(
            part for part in (
                f"CEP {self.postal_code}" if self.postal_code else "",
                self.city.upper(),
                self.state.upper(),
            ) if part
        )
        lines = (
            self.display_name.upper(),
            f"CNPJ: {self.tax_number}" if self.tax_number else "",
            self.address.upper(),
            location,
            f"FONE {self.phone}" if self.phone else "",
            f"EMAIL: {self.email}" if self.email else "",
        )
        return tuple(line for line in lines if line)


@dataclass(frozen=True)
class RendererConfig:
    """Print conventions for DocumentRenderer."""

    agency: AgencyProfile = field(default_factory=AgencyProfile)

    # Unfilled slots
    blank_date: str = BLANK_DATE
    blank_time: str = BLANK_TIME
    blank_text: str = BLANK_TEXT

    # Manifest
    responsible_marker: str = RESPONSIBLE_MARKER
    empty_value: str = EMPTY_VALUE

    # Debit form
    traveler_slots: int = MAX_TRAVELERS

    def __post_init__(self) -> None:
        if not 1 <= self.traveler_slots <= MAX_TRAVELERS:
            raise ValueError(
                f"traveler_slots must be 1..{MAX_TRAVELERS}, got {self.traveler_slots}"
            )
