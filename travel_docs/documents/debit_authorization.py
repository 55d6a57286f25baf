"""
Debit authorization — autorização de débito

Lays out a DebitAuthorizationRequest the way the printed form reads: issue
date, card brand boxes, card and holder data, travel data, currency boxes,
amounts, the rules text, the agency block and the traveler slots.
"""

from decimal import Decimal
from typing import Optional

from travel_docs.core.dates import format_date_br
from travel_docs.core.domain.debit import (
    CardBrand,
    DebitAuthorizationRequest,
    PaymentCurrency,
    TravelerLimitExceededError,
)
from travel_docs.core.domain.document import (
    ChoiceOption,
    ChoiceSection,
    ClauseSection,
    DocumentContent,
    DocumentKind,
    FieldEntry,
    FieldSection,
    TableRow,
    TableSection,
)
from travel_docs.core.money.formatting import format_currency
from travel_docs.core.validation.tax_id import format_tax_id
from travel_docs.documents.config import RendererConfig
from travel_docs.documents.templates import (
    DEBIT_CARD_HEADING,
    DEBIT_RULES,
    DEBIT_TITLE,
    DEBIT_VALIDITY_DAYS,
    fill,
)


def _amount(value: Optional[Decimal], currency: PaymentCurrency) -> str:
    if value is None:
        return ""
    return format_currency(value, currency.value)


def traveler_rows(request: DebitAuthorizationRequest, slots: int) -> tuple[TableRow, ...]:
    """
    Exactly `slots` rows, names upper-cased, unused slots blank.

    Raises:
        TravelerLimitExceededError: If the request lists more names than slots
    """
    if len(request.travelers) > slots:
        raise TravelerLimitExceededError(request.travelers[slots], slots)
    names = request.travelers + ("",) * (slots - len(request.travelers))
    return tuple(TableRow(cells=(f"{i}.", name.upper())) for i, name in enumerate(names, start=1))


def build_debit_authorization(
    request: DebitAuthorizationRequest, config: RendererConfig
) -> DocumentContent:
    rows = traveler_rows(request, config.traveler_slots)

    sections = (
        FieldSection(
            key="issue",
            heading="",
            fields=(FieldEntry("Data de emissão", format_date_br(request.issue_date)),),
        ),
        ChoiceSection(
            key="card_brand",
            heading="Cartão",
            options=tuple(
                ChoiceOption(brand.label, request.card_brand is brand) for brand in CardBrand
            ),
        ),
        FieldSection(
            key="card",
            heading=DEBIT_CARD_HEADING,
            fields=(
                FieldEntry("Cartão de crédito nº", request.card_number),
                FieldEntry("Banco emissor do cartão", request.issuing_bank),
                FieldEntry("Nome do titular do cartão (Igual CPF)", request.holder_name),
                FieldEntry("Validade cartão", request.card_expiry),
                FieldEntry("CPF", format_tax_id(request.holder_tax_id)),
                FieldEntry("RG", request.holder_rg),
                FieldEntry(
                    "Código de segurança (três últimos dígitos no verso do cartão)",
                    request.security_code,
                ),
                FieldEntry(
                    "Data de Nascimento (Titular do cartão)",
                    format_date_br(request.holder_birth_date, placeholder=""),
                ),
                FieldEntry("Telefone fixo para contato", request.holder_phone),
            ),
        ),
        FieldSection(
            key="travel",
            heading="Viagem",
            fields=(
                FieldEntry("Cia. Aérea", request.airline),
                FieldEntry("Trecho aéreo", request.route),
                FieldEntry("Cód. Aut.", request.authorization_code),
                FieldEntry("Data", format_date_br(request.travel_date, placeholder="")),
            ),
        ),
        ChoiceSection(
            key="currency",
            heading="Moeda",
            options=tuple(
                ChoiceOption(currency.label, request.currency is currency)
                for currency in PaymentCurrency
            ),
        ),
        FieldSection(
            key="amounts",
            heading="Valores",
            fields=(
                FieldEntry(
                    "Nº de parcelas",
                    str(request.installments) if request.installments is not None else "",
                ),
                FieldEntry("Valor Total", _amount(request.total_amount, request.currency)),
                FieldEntry("Valor das taxas", _amount(request.fees_amount, request.currency)),
                FieldEntry(
                    "Valor de cada parcela",
                    _amount(request.installment_amount, request.currency),
                ),
            ),
        ),
        fill(DEBIT_RULES, {"validity_days": DEBIT_VALIDITY_DAYS}),
        ClauseSection(key="agency", heading="Agência", paragraphs=config.agency.footer_lines()),
        TableSection(key="travelers", heading="VIAJANTES", columns=("#", "Nome"), rows=rows),
    )

    return DocumentContent(kind=DocumentKind.DEBIT_AUTHORIZATION, title=DEBIT_TITLE, sections=sections)
