"""
Clause Templates — document wording

Every sentence printed on a document lives here as an ordered clause record
with named placeholders ({contractor_name}, {total}, ...). Builders never
concatenate prose; they compute a field mapping and call fill().

A template naming a placeholder the builder did not supply is a programming
error and raises MissingTemplateFieldError. Extra fields are ignored.
"""

from dataclasses import dataclass
from string import Formatter
from typing import Final, Mapping

from travel_docs.core.domain.document import ClauseSection


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MissingTemplateFieldError(KeyError):
    """A template references placeholders that were not supplied."""

    def __init__(self, template_key: str, missing: tuple[str, ...]):
        super().__init__(f"Template {template_key!r} is missing fields: {', '.join(missing)}")
        self.template_key = template_key
        self.missing = missing


# =============================================================================
# TEMPLATE RECORD
# =============================================================================


@dataclass(frozen=True)
class ClauseTemplate:
    key: str
    heading: str
    paragraphs: tuple[str, ...]

    @property
    def placeholders(self) -> frozenset[str]:
        """Placeholder names used in heading and paragraphs."""
        names = set()
        for text in (self.heading, *self.paragraphs):
            for _, name, _, _ in Formatter().parse(text):
                if name:
                    names.add(name)
        return frozenset(names)


def fill(template: ClauseTemplate, fields: Mapping[str, object]) -> ClauseSection:
    """
    Substitute named fields into a template.

    Raises:
        MissingTemplateFieldError: If any placeholder has no value in `fields`
    """
    missing = tuple(sorted(template.placeholders - set(fields)))
    if missing:
        raise MissingTemplateFieldError(template.key, missing)

    return ClauseSection(
        key=template.key,
        heading=template.heading.format_map(fields),
        paragraphs=tuple(paragraph.format_map(fields) for paragraph in template.paragraphs),
    )


# =============================================================================
# SERVICE CONTRACT
# =============================================================================

CONTRACT_TITLE: Final[str] = "CONTRATO DE PRESTAÇÃO DE SERVIÇOS DE TRANSPORTE Nº {contract_number}"

CONTRACT_CLAUSES: Final[tuple[ClauseTemplate, ...]] = (
    ClauseTemplate(
        key="parties",
        heading="CLÁUSULA 1ª – DAS PARTES",
        paragraphs=(
            "CONTRATADA: {agency_identity}.",
            "CONTRATANTE: {contractor_name}, inscrito(a) no CPF sob o nº {contractor_tax_id}, "
            "portador(a) do RG nº {contractor_rg}, telefone {contractor_phone}.",
        ),
    ),
    ClauseTemplate(
        key="object",
        heading="CLÁUSULA 2ª – DO OBJETO",
        paragraphs=(
            "O presente contrato tem por objeto a prestação de serviços de transporte de "
            "passageiros em regime de fretamento, referente à viagem \"{trip_name}\", com "
            "origem em {origin} e destino a {destination}.",
            "Roteiro: {itinerary}",
        ),
    ),
    ClauseTemplate(
        key="schedule",
        heading="CLÁUSULA 3ª – DO PERÍODO",
        paragraphs=(
            "Partida em {departure_date}, às {departure_time}.",
            "Retorno em {return_date}, às {return_time}.",
            "Total de diárias contratadas: {day_count}.",
        ),
    ),
    ClauseTemplate(
        key="price",
        heading="CLÁUSULA 4ª – DO PREÇO",
        paragraphs=(
            "Pelos serviços contratados, o CONTRATANTE pagará à CONTRATADA o valor total de "
            "{total} ({total_in_words}), assim discriminado:",
            "a) Diárias do veículo: {daily_subtotal};",
            "b) Quilometragem ({distance_km} km): {km_subtotal};",
            "c) Diárias do guia: {guide_subtotal}.",
        ),
    ),
    ClauseTemplate(
        key="obligations",
        heading="CLÁUSULA 5ª – DAS OBRIGAÇÕES",
        paragraphs=(
            "A CONTRATADA se obriga a disponibilizar veículo em perfeitas condições de uso, "
            "conduzido por motorista habilitado, nas datas e horários acima indicados.",
            "O CONTRATANTE se obriga a entregar, antes da partida, a lista de passageiros com "
            "seus documentos de identificação, e responde pelos danos causados ao veículo "
            "pelos passageiros.",
        ),
    ),
    ClauseTemplate(
        key="cancellation",
        heading="CLÁUSULA 6ª – DO CANCELAMENTO",
        paragraphs=(
            "O cancelamento por iniciativa do CONTRATANTE deverá ser comunicado por escrito, "
            "ficando o CONTRATANTE responsável pelas despesas já realizadas pela CONTRATADA "
            "até a data da comunicação.",
        ),
    ),
    ClauseTemplate(
        key="forum",
        heading="CLÁUSULA 7ª – DO FORO",
        paragraphs=(
            "Fica eleito o foro da comarca de {city} para dirimir quaisquer questões "
            "oriundas deste contrato.",
        ),
    ),
)

CONTRACT_SIGNATURES: Final[ClauseTemplate] = ClauseTemplate(
    key="signatures",
    heading="ASSINATURAS",
    paragraphs=(
        "{city}, {generated_on_long}.",
        "{signature_line}",
        "CONTRATANTE: {contractor_name}",
        "{signature_line}",
        "CONTRATADA: {agency_name}",
    ),
)


# =============================================================================
# PASSENGER MANIFEST
# =============================================================================

MANIFEST_TITLE: Final[str] = "Lista de Passageiros - {trip_name}"

MANIFEST_ITINERARY: Final[ClauseTemplate] = ClauseTemplate(
    key="itinerary",
    heading="Roteiro Detalhado",
    paragraphs=("{itinerary}",),
)


# =============================================================================
# DEBIT AUTHORIZATION
# =============================================================================

DEBIT_TITLE: Final[str] = "Autorização de Débito - Serviços de Viagens"

DEBIT_CARD_HEADING: Final[str] = (
    "Autorizo e reconheço o débito em minha conta do cartão de crédito abaixo:"
)

DEBIT_RULES: Final[ClauseTemplate] = ClauseTemplate(
    key="rules",
    heading="ATENÇÃO - Regras",
    paragraphs=(
        "Qualquer transação realizada fora dos padrões contratuais das Administradoras "
        "implicará em sanções legais, tanto para o portador como para a agência.",
        "Ao autorizar o débito no cartão de crédito, titular e Agência declaram estar "
        "cientes e concordam com as seguintes condições:",
        "1 - Questionamentos ou cancelamentos dos serviços adquiridos devem ser resolvidos "
        "entre as partes - Agência e titular.",
        "2 - A Agência é responsável pela correta aceitação do cartão, conferindo em sua "
        "apresentação a data de validade, autenticidade e assinatura do Titular nos termos "
        "do Contrato de Afiliação.",
        "3 - Esta autorização é válida por {validity_days} dias. Em caso de contestação por "
        "parte do titular, a Agência é responsável pela apresentação deste original "
        "devidamente preenchido e assinado, cópia frente e verso do cartão, cópia de um "
        "documento oficial que comprove a identidade do Portador, cópia dos "
        "bilhetes/vouchers e cópia do Comprovante de Venda.",
        "4 - Caso os serviços sejam prestados em nome de outras pessoas, além do titular do "
        "cartão, seus nomes deverão ser relacionados abaixo, ressaltando que a assinatura "
        "do Portador do cartão neste documento é obrigatória.",
        "Obs.: Este procedimento se aplica a transações efetuadas com cartões emitidos no "
        "Brasil.",
    ),
)

DEBIT_VALIDITY_DAYS: Final[int] = 15


# =============================================================================
# REPORTS
# =============================================================================

BIRTHDAY_TITLE: Final[str] = "Aniversariantes - {month_name}"

HOTEL_TITLE: Final[str] = "Histórico de Hotéis - {country}"

HOTEL_ORDER_NOTE: Final[str] = "* Ordenado pela data de check-in mais recente."
