"""
Record models for SEC ownership documents (Forms 3, 4 and 5).

Field tables follow the EDGAR Ownership XML Technical Specification. Every
scalar in the transaction and holding tables is a ValueFootnote, the SEC
convention that lets any value carry a footnote reference.

``required=True`` marks elements the specification mandates; it is only
enforced when the document is parsed with the strict policy.
"""

from typing import Annotated, List, Optional

from sec_edgar_parser.models.fields import EdgarRecord, XmlField
from sec_edgar_parser.models.values import ValueFootnote


class Issuer(EdgarRecord):
    cik: Annotated[Optional[str], XmlField('issuerCik', required=True)] = None
    name: Annotated[Optional[str], XmlField('issuerName')] = None
    trading_symbol: Annotated[Optional[str], XmlField('issuerTradingSymbol')] = None


class ReportingOwnerID(EdgarRecord):
    cik: Annotated[Optional[str], XmlField('rptOwnerCik', required=True)] = None
    ccc: Annotated[Optional[str], XmlField('rptOwnerCcc')] = None
    name: Annotated[Optional[str], XmlField('rptOwnerName')] = None


class ReportingOwnerAddress(EdgarRecord):
    street1: Annotated[Optional[str], XmlField('rptOwnerStreet1')] = None
    street2: Annotated[Optional[str], XmlField('rptOwnerStreet2')] = None
    city: Annotated[Optional[str], XmlField('rptOwnerCity')] = None
    state: Annotated[Optional[str], XmlField('rptOwnerState')] = None
    zip_code: Annotated[Optional[str], XmlField('rptOwnerZipCode')] = None
    state_description: Annotated[Optional[str], XmlField('rptOwnerStateDescription')] = None


class ReportingOwnerRelationship(EdgarRecord):
    is_director: Annotated[Optional[bool], XmlField('isDirector')] = None
    is_officer: Annotated[Optional[bool], XmlField('isOfficer')] = None
    is_ten_percent_owner: Annotated[Optional[bool], XmlField('isTenPercentOwner')] = None
    is_other: Annotated[Optional[bool], XmlField('isOther')] = None
    officer_title: Annotated[Optional[str], XmlField('officerTitle')] = None
    other_text: Annotated[Optional[str], XmlField('otherText')] = None


class ReportingOwner(EdgarRecord):
    id: Annotated[Optional[ReportingOwnerID], XmlField('reportingOwnerId', required=True)] = None
    address: Annotated[Optional[ReportingOwnerAddress], XmlField('reportingOwnerAddress')] = None
    relationship: Annotated[
        Optional[ReportingOwnerRelationship],
        XmlField('reportingOwnerRelationship', required=True)
    ] = None


class TransactionCoding(EdgarRecord):
    form_type: Annotated[Optional[str], XmlField('transactionFormType', required=True)] = None
    transaction_code: Annotated[Optional[str], XmlField('transactionCode', required=True)] = None
    equity_swap_involved: Annotated[Optional[bool], XmlField('equitySwapInvolved', required=True)] = None
    footnote_id: Annotated[Optional[str], XmlField('footnoteId', attribute='id')] = None


class HoldingCoding(EdgarRecord):
    """Coding block on holdings: form type only, no transaction code."""

    form_type: Annotated[Optional[str], XmlField('transactionFormType')] = None
    footnote_id: Annotated[Optional[str], XmlField('footnoteId', attribute='id')] = None


class TransactionAmounts(EdgarRecord):
    shares: Annotated[Optional[ValueFootnote], XmlField('transactionShares', required=True)] = None
    price_per_share: Annotated[
        Optional[ValueFootnote],
        XmlField('transactionPricePerShare', required=True)
    ] = None
    acquired_disposed_code: Annotated[
        Optional[ValueFootnote],
        XmlField('transactionAcquiredDisposedCode', required=True)
    ] = None


class DerivativeTransactionAmounts(EdgarRecord):
    """Derivative amounts report shares or a total value, not necessarily both."""

    shares: Annotated[Optional[ValueFootnote], XmlField('transactionShares')] = None
    price_per_share: Annotated[
        Optional[ValueFootnote],
        XmlField('transactionPricePerShare', required=True)
    ] = None
    total_value: Annotated[Optional[ValueFootnote], XmlField('transactionTotalValue')] = None
    acquired_disposed_code: Annotated[
        Optional[ValueFootnote],
        XmlField('transactionAcquiredDisposedCode', required=True)
    ] = None


class UnderlyingSecurity(EdgarRecord):
    title: Annotated[Optional[ValueFootnote], XmlField('underlyingSecurityTitle', required=True)] = None
    shares: Annotated[Optional[ValueFootnote], XmlField('underlyingSecurityShares')] = None
    value: Annotated[Optional[ValueFootnote], XmlField('underlyingSecurityValue')] = None


class PostTransactionAmounts(EdgarRecord):
    shares_owned_following_transaction: Annotated[
        Optional[ValueFootnote],
        XmlField('sharesOwnedFollowingTransaction')
    ] = None
    value_owned_following_transaction: Annotated[
        Optional[ValueFootnote],
        XmlField('valueOwnedFollowingTransaction')
    ] = None


class OwnershipNature(EdgarRecord):
    direct_or_indirect_ownership: Annotated[
        Optional[ValueFootnote],
        XmlField('directOrIndirectOwnership', required=True)
    ] = None
    nature_of_ownership: Annotated[Optional[ValueFootnote], XmlField('natureOfOwnership')] = None


class NonDerivativeTransaction(EdgarRecord):
    security_title: Annotated[Optional[ValueFootnote], XmlField('securityTitle', required=True)] = None
    transaction_date: Annotated[Optional[ValueFootnote], XmlField('transactionDate', required=True)] = None
    deemed_execution_date: Annotated[Optional[ValueFootnote], XmlField('deemedExecutionDate')] = None
    transaction_coding: Annotated[
        Optional[TransactionCoding],
        XmlField('transactionCoding', required=True)
    ] = None
    transaction_timeliness: Annotated[Optional[ValueFootnote], XmlField('transactionTimeliness')] = None
    transaction_amounts: Annotated[
        Optional[TransactionAmounts],
        XmlField('transactionAmounts', required=True)
    ] = None
    post_transaction_amounts: Annotated[
        Optional[PostTransactionAmounts],
        XmlField('postTransactionAmounts', required=True)
    ] = None
    ownership_nature: Annotated[
        Optional[OwnershipNature],
        XmlField('ownershipNature', required=True)
    ] = None


class DerivativeTransaction(EdgarRecord):
    security_title: Annotated[Optional[ValueFootnote], XmlField('securityTitle', required=True)] = None
    conversion_or_exercise_price: Annotated[
        Optional[ValueFootnote],
        XmlField('conversionOrExercisePrice', required=True)
    ] = None
    transaction_date: Annotated[Optional[ValueFootnote], XmlField('transactionDate', required=True)] = None
    deemed_execution_date: Annotated[Optional[ValueFootnote], XmlField('deemedExecutionDate')] = None
    transaction_coding: Annotated[
        Optional[TransactionCoding],
        XmlField('transactionCoding', required=True)
    ] = None
    transaction_timeliness: Annotated[Optional[ValueFootnote], XmlField('transactionTimeliness')] = None
    transaction_amounts: Annotated[
        Optional[DerivativeTransactionAmounts],
        XmlField('transactionAmounts', required=True)
    ] = None
    exercise_date: Annotated[Optional[ValueFootnote], XmlField('exerciseDate')] = None
    expiration_date: Annotated[Optional[ValueFootnote], XmlField('expirationDate')] = None
    underlying_security: Annotated[
        Optional[UnderlyingSecurity],
        XmlField('underlyingSecurity', required=True)
    ] = None
    post_transaction_amounts: Annotated[
        Optional[PostTransactionAmounts],
        XmlField('postTransactionAmounts', required=True)
    ] = None
    ownership_nature: Annotated[
        Optional[OwnershipNature],
        XmlField('ownershipNature', required=True)
    ] = None


class NonDerivativeHolding(EdgarRecord):
    security_title: Annotated[Optional[ValueFootnote], XmlField('securityTitle', required=True)] = None
    transaction_coding: Annotated[Optional[HoldingCoding], XmlField('transactionCoding')] = None
    post_transaction_amounts: Annotated[
        Optional[PostTransactionAmounts],
        XmlField('postTransactionAmounts', required=True)
    ] = None
    ownership_nature: Annotated[
        Optional[OwnershipNature],
        XmlField('ownershipNature', required=True)
    ] = None


class DerivativeHolding(EdgarRecord):
    security_title: Annotated[Optional[ValueFootnote], XmlField('securityTitle', required=True)] = None
    conversion_or_exercise_price: Annotated[
        Optional[ValueFootnote],
        XmlField('conversionOrExercisePrice', required=True)
    ] = None
    transaction_coding: Annotated[Optional[HoldingCoding], XmlField('transactionCoding')] = None
    exercise_date: Annotated[Optional[ValueFootnote], XmlField('exerciseDate')] = None
    expiration_date: Annotated[Optional[ValueFootnote], XmlField('expirationDate')] = None
    underlying_security: Annotated[
        Optional[UnderlyingSecurity],
        XmlField('underlyingSecurity', required=True)
    ] = None
    post_transaction_amounts: Annotated[
        Optional[PostTransactionAmounts],
        XmlField('postTransactionAmounts', required=True)
    ] = None
    ownership_nature: Annotated[
        Optional[OwnershipNature],
        XmlField('ownershipNature', required=True)
    ] = None


class NonDerivativeTable(EdgarRecord):
    transactions: Annotated[
        List[NonDerivativeTransaction],
        XmlField('nonDerivativeTransaction')
    ] = []
    holdings: Annotated[List[NonDerivativeHolding], XmlField('nonDerivativeHolding')] = []


class DerivativeTable(EdgarRecord):
    transactions: Annotated[List[DerivativeTransaction], XmlField('derivativeTransaction')] = []
    holdings: Annotated[List[DerivativeHolding], XmlField('derivativeHolding')] = []


class Footnote(EdgarRecord):
    """<footnote id="F1">text</footnote>"""

    id: Annotated[Optional[str], XmlField(attribute='id', required=True)] = None
    note: Annotated[Optional[str], XmlField()] = None


class OwnerSignature(EdgarRecord):
    name: Annotated[Optional[str], XmlField('signatureName', required=True)] = None
    date: Annotated[Optional[str], XmlField('signatureDate', required=True)] = None


class OwnershipDocument(EdgarRecord):
    """
    A Form 3, 4 or 5 ownership document (root element <ownershipDocument>).

    Example:
        >>> doc = parse_ownership_form(xml)
        >>> doc.issuer.trading_symbol
        'ACME'
        >>> doc.non_derivative_table.transactions[0].transaction_amounts.shares.value
        IntValue(kind='int', value=100)
    """

    schema_version: Annotated[Optional[str], XmlField('schemaVersion')] = None
    document_type: Annotated[Optional[str], XmlField('documentType', required=True)] = None
    period_of_report: Annotated[Optional[str], XmlField('periodOfReport', required=True)] = None
    date_of_original_submission: Annotated[Optional[str], XmlField('dateOfOriginalSubmission')] = None
    no_securities_owned: Annotated[Optional[bool], XmlField('noSecuritiesOwned')] = None
    not_subject_to_section_16: Annotated[Optional[bool], XmlField('notSubjectToSection16')] = None
    form3_holdings_reported: Annotated[Optional[bool], XmlField('form3HoldingsReported')] = None
    form4_transactions_reported: Annotated[Optional[bool], XmlField('form4TransactionsReported')] = None
    issuer: Annotated[Optional[Issuer], XmlField('issuer', required=True)] = None
    reporting_owner: Annotated[Optional[ReportingOwner], XmlField('reportingOwner', required=True)] = None
    aff10b5_one: Annotated[Optional[bool], XmlField('aff10b5One')] = None
    non_derivative_table: Annotated[Optional[NonDerivativeTable], XmlField('nonDerivativeTable')] = None
    derivative_table: Annotated[Optional[DerivativeTable], XmlField('derivativeTable')] = None
    footnotes: Annotated[List[Footnote], XmlField('footnote', container='footnotes')] = []
    remarks: Annotated[Optional[str], XmlField('remarks')] = None
    owner_signature: Annotated[Optional[OwnerSignature], XmlField('ownerSignature', required=True)] = None

    def footnote(self, footnote_id: Optional[str]) -> Optional[Footnote]:
        """
        Look up a footnote referenced by a ValueFootnote or coding block.

        Returns None for ids that are not declared in <footnotes>.
        """
        for note in self.footnotes:
            if note.id == footnote_id:
                return note
        return None
