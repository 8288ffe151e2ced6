"""
Record models for Form 13F filings.

Two documents make up a 13F filing:
- the primary document (<edgarSubmission>): header, cover page, signature
  block and summary page
- the information table (<informationTable>): one <infoTable> per security

Field tables follow the EDGAR Form 13F XML Technical Specification.
``required=True`` is only enforced under the strict policy.
"""

from typing import Annotated, List, Optional

from sec_edgar_parser.models.fields import EdgarRecord, XmlField


# === Header ===

class Flags(EdgarRecord):
    confirming_copy_flag: Annotated[Optional[bool], XmlField('confirmingCopyFlag')] = None
    return_copy_flag: Annotated[Optional[bool], XmlField('returnCopyFlag')] = None
    override_internet_flag: Annotated[Optional[bool], XmlField('overrideInternetFlag')] = None


class Credentials(EdgarRecord):
    cik: Annotated[Optional[str], XmlField('cik', required=True)] = None
    ccc: Annotated[Optional[str], XmlField('ccc', required=True)] = None


class Filer(EdgarRecord):
    credentials: Annotated[Optional[Credentials], XmlField('credentials', required=True)] = None
    file_number: Annotated[Optional[str], XmlField('fileNumber')] = None


class Contact(EdgarRecord):
    name: Annotated[Optional[str], XmlField('contactName')] = None
    phone_number: Annotated[Optional[str], XmlField('contactPhoneNumber')] = None
    email_address: Annotated[Optional[str], XmlField('contactEmailAddress')] = None


class Notifications(EdgarRecord):
    email_addresses: Annotated[List[str], XmlField('notificationEmailAddress')] = []


class FilerInfo(EdgarRecord):
    live_test_flag: Annotated[Optional[str], XmlField('liveTestFlag', required=True)] = None
    flags: Annotated[Optional[Flags], XmlField('flags')] = None
    filer: Annotated[Optional[Filer], XmlField('filer', required=True)] = None
    contact: Annotated[Optional[Contact], XmlField('contact')] = None
    notifications: Annotated[Optional[Notifications], XmlField('notifications')] = None
    period_of_report: Annotated[Optional[str], XmlField('periodOfReport', required=True)] = None


class HeaderData(EdgarRecord):
    submission_type: Annotated[Optional[str], XmlField('submissionType', required=True)] = None
    filer_info: Annotated[Optional[FilerInfo], XmlField('filerInfo', required=True)] = None


# === Cover page ===

class AmendmentInfo(EdgarRecord):
    amendment_type: Annotated[Optional[str], XmlField('amendmentType')] = None
    conf_denied_expired: Annotated[Optional[bool], XmlField('confDeniedExpired')] = None
    date_denied_expired: Annotated[Optional[str], XmlField('dateDeniedExpired')] = None
    date_reported: Annotated[Optional[str], XmlField('dateReported')] = None
    reason_for_non_confidentiality: Annotated[
        Optional[str],
        XmlField('reasonForNonConfidentiality')
    ] = None


class Address(EdgarRecord):
    street1: Annotated[Optional[str], XmlField('street1', required=True)] = None
    street2: Annotated[Optional[str], XmlField('street2')] = None
    city: Annotated[Optional[str], XmlField('city', required=True)] = None
    state_or_country: Annotated[Optional[str], XmlField('stateOrCountry', required=True)] = None
    zip_code: Annotated[Optional[str], XmlField('zipCode', required=True)] = None


class FilingManager(EdgarRecord):
    name: Annotated[Optional[str], XmlField('name', required=True)] = None
    address: Annotated[Optional[Address], XmlField('address', required=True)] = None


class OtherManager(EdgarRecord):
    cik: Annotated[Optional[str], XmlField('cik')] = None
    name: Annotated[Optional[str], XmlField('name')] = None
    form_13f_file_number: Annotated[Optional[str], XmlField('form13FFileNumber')] = None
    crd_number: Annotated[Optional[str], XmlField('crdNumber')] = None
    sec_file_number: Annotated[Optional[str], XmlField('secFileNumber')] = None


class CoverPage(EdgarRecord):
    report_calendar_or_quarter: Annotated[
        Optional[str],
        XmlField('reportCalendarOrQuarter', required=True)
    ] = None
    is_amendment: Annotated[Optional[bool], XmlField('isAmendment')] = None
    amendment_number: Annotated[Optional[int], XmlField('amendmentNumber')] = None
    amendment_info: Annotated[Optional[AmendmentInfo], XmlField('amendmentInfo')] = None
    filing_manager: Annotated[Optional[FilingManager], XmlField('filingManager', required=True)] = None
    report_type: Annotated[Optional[str], XmlField('reportType', required=True)] = None
    form_13f_file_number: Annotated[Optional[str], XmlField('form13FFileNumber')] = None
    other_managers: Annotated[
        List[OtherManager],
        XmlField('otherManager', container='otherManagersInfo')
    ] = []
    provide_info_for_instruction5: Annotated[
        Optional[bool],
        XmlField('provideInfoForInstruction5', required=True)
    ] = None
    additional_information: Annotated[Optional[str], XmlField('additionalInformation')] = None


# === Signature and summary ===

class SignatureBlock(EdgarRecord):
    name: Annotated[Optional[str], XmlField('name', required=True)] = None
    title: Annotated[Optional[str], XmlField('title', required=True)] = None
    phone: Annotated[Optional[str], XmlField('phone', required=True)] = None
    signature: Annotated[Optional[str], XmlField('signature', required=True)] = None
    city: Annotated[Optional[str], XmlField('city', required=True)] = None
    state_or_country: Annotated[Optional[str], XmlField('stateOrCountry', required=True)] = None
    signature_date: Annotated[Optional[str], XmlField('signatureDate', required=True)] = None


class OtherManagerWithSequence(EdgarRecord):
    sequence_number: Annotated[Optional[int], XmlField('sequenceNumber')] = None
    manager: Annotated[Optional[OtherManager], XmlField('otherManager')] = None


class SummaryPage(EdgarRecord):
    other_included_managers_count: Annotated[
        Optional[int],
        XmlField('otherIncludedManagersCount', required=True)
    ] = None
    table_entry_total: Annotated[Optional[int], XmlField('tableEntryTotal', required=True)] = None
    table_value_total: Annotated[Optional[int], XmlField('tableValueTotal', required=True)] = None
    is_confidential_omitted: Annotated[Optional[bool], XmlField('isConfidentialOmitted')] = None
    other_managers: Annotated[
        List[OtherManagerWithSequence],
        XmlField('otherManager2', container='otherManagers2Info')
    ] = []


class OtherDocument(EdgarRecord):
    conformed_name: Annotated[Optional[str], XmlField('conformedName')] = None
    conformed_document_type: Annotated[Optional[str], XmlField('conformedDocumentType')] = None
    description: Annotated[Optional[str], XmlField('description')] = None
    contents: Annotated[Optional[str], XmlField('contents')] = None


class FormData(EdgarRecord):
    cover_page: Annotated[Optional[CoverPage], XmlField('coverPage', required=True)] = None
    signature_block: Annotated[Optional[SignatureBlock], XmlField('signatureBlock', required=True)] = None
    summary_page: Annotated[Optional[SummaryPage], XmlField('summaryPage')] = None
    documents: Annotated[List[OtherDocument], XmlField('document', container='documents')] = []


class ThirteenFDocument(EdgarRecord):
    """
    13F primary document (root element <edgarSubmission>).

    Example:
        >>> doc = parse_form13f_document(xml)
        >>> doc.form_data.cover_page.filing_manager.name
        'Example Capital LLC'
    """

    schema_version: Annotated[Optional[str], XmlField('schemaVersion')] = None
    header_data: Annotated[Optional[HeaderData], XmlField('headerData', required=True)] = None
    form_data: Annotated[Optional[FormData], XmlField('formData', required=True)] = None


# === Information table ===

class SharesOrPrincipalAmount(EdgarRecord):
    amount: Annotated[Optional[int], XmlField('sshPrnamt', required=True)] = None
    shares_or_principal_type: Annotated[Optional[str], XmlField('sshPrnamtType', required=True)] = None


class VotingAuthority(EdgarRecord):
    sole: Annotated[Optional[int], XmlField('Sole', required=True)] = None
    shared: Annotated[Optional[int], XmlField('Shared', required=True)] = None
    none: Annotated[Optional[int], XmlField('None', required=True)] = None


class TableEntry(EdgarRecord):
    """One <infoTable> row: a single security position."""

    name_of_issuer: Annotated[Optional[str], XmlField('nameOfIssuer', required=True)] = None
    title_of_class: Annotated[Optional[str], XmlField('titleOfClass', required=True)] = None
    cusip: Annotated[Optional[str], XmlField('cusip', required=True)] = None
    figi: Annotated[Optional[str], XmlField('figi')] = None
    value: Annotated[Optional[int], XmlField('value', required=True)] = None
    shares_or_principal_amount: Annotated[
        Optional[SharesOrPrincipalAmount],
        XmlField('shrsOrPrnAmt', required=True)
    ] = None
    put_call: Annotated[Optional[str], XmlField('putCall')] = None
    investment_discretion: Annotated[Optional[str], XmlField('investmentDiscretion', required=True)] = None
    other_manager: Annotated[List[int], XmlField('otherManager', separator=',')] = []
    voting_authority: Annotated[Optional[VotingAuthority], XmlField('votingAuthority', required=True)] = None


class InformationTable(EdgarRecord):
    """
    13F information table (root element <informationTable>).

    Example:
        >>> table = parse_form13f_table(xml)
        >>> table.entries[0].voting_authority
        VotingAuthority(sole=100, shared=0, none=0)
    """

    entries: Annotated[List[TableEntry], XmlField('infoTable')] = []

    def total_value(self) -> int:
        """Sum of reported market values, skipping entries without a value."""
        return sum(entry.value for entry in self.entries if entry.value is not None)
