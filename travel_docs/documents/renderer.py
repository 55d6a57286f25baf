"""
DocumentRenderer — entity fields + computed values → DocumentContent

One entry point for every printable document. The renderer is pure: it
reads no clock and holds no state besides its configuration, so identical
inputs give equal DocumentContent (and byte-identical exports).

    renderer = DocumentRenderer(RendererConfig(agency=AgencyProfile(name="...")))
    content = renderer.render(DocumentKind.CONTRACT, contract_input,
                              breakdown=breakdown, verbalized_total=words)

`fields` is the input model of the kind (ContractInput, ManifestInput,
DebitAuthorizationRequest, BirthdayReportInput, HotelReportInput) or a plain
mapping that validates into it.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel

from travel_docs.core.domain.debit import DebitAuthorizationRequest
from travel_docs.core.domain.document import DocumentContent, DocumentKind
from travel_docs.core.money.costs import CostBreakdown
from travel_docs.documents.config import RendererConfig
from travel_docs.documents.contract import build_contract
from travel_docs.documents.debit_authorization import build_debit_authorization
from travel_docs.documents.inputs import (
    BirthdayReportInput,
    ContractInput,
    HotelReportInput,
    ManifestInput,
)
from travel_docs.documents.manifest import build_manifest
from travel_docs.documents.reports import build_birthday_report, build_hotel_report

logger = logging.getLogger(__name__)


INPUT_TYPES: dict[DocumentKind, type[BaseModel]] = {
    DocumentKind.CONTRACT: ContractInput,
    DocumentKind.PASSENGER_MANIFEST: ManifestInput,
    DocumentKind.DEBIT_AUTHORIZATION: DebitAuthorizationRequest,
    DocumentKind.BIRTHDAY_REPORT: BirthdayReportInput,
    DocumentKind.HOTEL_REPORT: HotelReportInput,
}


class DocumentRenderer:
    """Renders every DocumentKind with a shared configuration."""

    def __init__(self, config: RendererConfig | None = None):
        self.config = config or RendererConfig()
        self._builders: dict[DocumentKind, Callable[[Any], DocumentContent]] = {
            DocumentKind.PASSENGER_MANIFEST: lambda data: build_manifest(data, self.config),
            DocumentKind.DEBIT_AUTHORIZATION: lambda data: build_debit_authorization(data, self.config),
            DocumentKind.BIRTHDAY_REPORT: lambda data: build_birthday_report(data, self.config),
            DocumentKind.HOTEL_REPORT: lambda data: build_hotel_report(data, self.config),
        }

    def render(
        self,
        kind: DocumentKind | str,
        fields: BaseModel | Mapping[str, Any],
        breakdown: Optional[CostBreakdown] = None,
        verbalized_total: Optional[str] = None,
    ) -> DocumentContent:
        """
        Render a document.

        Args:
            kind: Document to render
            fields: Input model of that kind, or a mapping validating into it
            breakdown: Cost breakdown (contract only, required there)
            verbalized_total: Written-out total (contract only, required there)

        Raises:
            ValueError: Contract without breakdown or verbalized total
            TypeError: `fields` is neither the kind's input model nor a mapping
            pydantic.ValidationError: Mapping that does not validate
            TravelerLimitExceededError: More travelers than printable slots
        """
        kind = DocumentKind(kind)
        data = self._coerce_input(kind, fields)

        if kind is DocumentKind.CONTRACT:
            if breakdown is None or verbalized_total is None:
                raise ValueError("Contract rendering requires breakdown and verbalized_total")
            content = build_contract(data, breakdown, verbalized_total, self.config)
        else:
            content = self._builders[kind](data)

        logger.debug("Rendered %s: %d sections", kind.value, len(content.sections))
        return content

    @staticmethod
    def _coerce_input(kind: DocumentKind, fields: BaseModel | Mapping[str, Any]) -> BaseModel:
        input_type = INPUT_TYPES[kind]
        if isinstance(fields, input_type):
            return fields
        if isinstance(fields, Mapping):
            return input_type.model_validate(dict(fields))
        raise TypeError(
            f"{kind.value} expects {input_type.__name__} or a mapping, got {type(fields).__name__}"
        )
