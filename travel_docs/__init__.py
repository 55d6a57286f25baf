"""
travel-docs — financial computation and document-text synthesis for a
travel-agency back-office.

Packages:
- travel_docs.core       : CPF validation, money (verbalizer, costs, formatting),
                           dates, domain models, record contracts
- travel_docs.documents  : contract, passenger manifest, debit authorization and
                           report renderers
"""

__version__ = "1.0.0"
