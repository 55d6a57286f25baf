"""
Printable documents.

Builders for the service contract, passenger manifest, debit authorization
and back-office reports; the DocumentRenderer dispatcher; text/HTML export;
and the generation pipeline.
"""

from travel_docs.documents.config import (
    BLANK_DATE,
    BLANK_TEXT,
    BLANK_TIME,
    RESPONSIBLE_MARKER,
    AgencyProfile,
    RendererConfig,
)
from travel_docs.documents.inputs import (
    BirthdayReportInput,
    ContractInput,
    HotelReportInput,
    ManifestInput,
)
from travel_docs.documents.manifest import sort_passengers
from travel_docs.documents.markup import render_html, render_text
from travel_docs.documents.pipeline import (
    generate_contract,
    generate_debit_authorization,
    generate_manifest,
)
from travel_docs.documents.renderer import DocumentRenderer
from travel_docs.documents.templates import ClauseTemplate, MissingTemplateFieldError, fill

__all__ = [
    # Config
    "BLANK_DATE",
    "BLANK_TEXT",
    "BLANK_TIME",
    "RESPONSIBLE_MARKER",
    "AgencyProfile",
    "RendererConfig",
    # Inputs
    "BirthdayReportInput",
    "ContractInput",
    "HotelReportInput",
    "ManifestInput",
    # Rendering
    "DocumentRenderer",
    "ClauseTemplate",
    "MissingTemplateFieldError",
    "fill",
    "sort_passengers",
    # Export
    "render_html",
    "render_text",
    # Pipeline
    "generate_contract",
    "generate_debit_authorization",
    "generate_manifest",
]
