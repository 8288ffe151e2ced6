"""
Unit tests for Form 13F primary document and information table parsing.
"""

import re

import pytest


def _without(xml: str, tag: str) -> str:
    return re.sub(rf'<{tag}>.*?</{tag}>', '', xml, count=1, flags=re.S)


class TestParseForm13FDocument:
    """Test suite for the <edgarSubmission> primary document."""

    def test_header_data(self, form13f_xml):
        """Should decode submission header, filer and notifications."""
        from sec_edgar_parser import parse_form13f_document

        header = parse_form13f_document(form13f_xml).header_data

        assert header.submission_type == '13F-HR'
        assert header.filer_info.live_test_flag == 'LIVE'
        assert header.filer_info.flags.return_copy_flag is True
        assert header.filer_info.filer.credentials.cik == '0001234567'
        assert header.filer_info.contact.name == 'John Smith'
        assert header.filer_info.contact.email_address is None
        assert header.filer_info.notifications.email_addresses == [
            'ops@example.com',
            'compliance@example.com',
        ]
        assert header.filer_info.period_of_report == '12-31-2023'

    def test_cover_page(self, form13f_xml):
        """Should decode the cover page, matching prefixed address elements."""
        from sec_edgar_parser import parse_form13f_document

        cover = parse_form13f_document(form13f_xml).form_data.cover_page

        assert cover.report_calendar_or_quarter == '12-31-2023'
        assert cover.is_amendment is False
        assert cover.amendment_info is None
        assert cover.filing_manager.name == 'Example Capital LLC'
        assert cover.filing_manager.address.city == 'New York'
        assert cover.filing_manager.address.street2 is None
        assert cover.report_type == '13F HOLDINGS REPORT'
        assert cover.provide_info_for_instruction5 is False
        assert cover.other_managers == []

    def test_signature_and_summary(self, form13f_xml):
        """Should decode signature block and summary page counts."""
        from sec_edgar_parser import parse_form13f_document

        form_data = parse_form13f_document(form13f_xml).form_data

        assert form_data.signature_block.signature == '/s/ John Smith'
        assert form_data.signature_block.signature_date == '02-14-2024'

        summary = form_data.summary_page
        assert summary.other_included_managers_count == 1
        assert summary.table_entry_total == 2
        assert summary.table_value_total == 250000
        assert summary.is_confidential_omitted is False
        assert len(summary.other_managers) == 1
        assert summary.other_managers[0].sequence_number == 1
        assert summary.other_managers[0].manager.name == 'Example Advisors LP'
        assert form_data.documents == []

    def test_missing_required_element_strict(self, form13f_xml):
        """Strict is the default for 13F documents."""
        from sec_edgar_parser import MissingRequiredElementError, parse_form13f_document

        with pytest.raises(MissingRequiredElementError) as exc_info:
            parse_form13f_document(_without(form13f_xml, 'signatureBlock'))

        assert exc_info.value.tag == 'signatureBlock'
        assert exc_info.value.parent == 'formData'

    def test_missing_required_element_lenient(self, form13f_xml):
        """Lenient policy leaves the missing block as None."""
        from sec_edgar_parser import parse_form13f_document

        doc = parse_form13f_document(_without(form13f_xml, 'signatureBlock'), policy='lenient')

        assert doc.form_data.signature_block is None
        assert doc.form_data.cover_page.report_type == '13F HOLDINGS REPORT'

    def test_wrong_root_element(self, info_table_xml):
        """Strict policy rejects an information table passed as the primary document."""
        from sec_edgar_parser import MissingRequiredElementError, parse_form13f_document

        with pytest.raises(MissingRequiredElementError, match="edgarSubmission"):
            parse_form13f_document(info_table_xml)


class TestParseForm13FTable:
    """Test suite for the <informationTable> document."""

    def test_entries_in_document_order(self, info_table_xml):
        """Should decode one TableEntry per <infoTable>."""
        from sec_edgar_parser import parse_form13f_table

        table = parse_form13f_table(info_table_xml)

        assert [entry.cusip for entry in table.entries] == ['037833100', '594918104']
        assert table.total_value() == 250000

    def test_voting_authority(self, info_table_xml):
        """Should decode Sole/Shared/None as integers."""
        from sec_edgar_parser import parse_form13f_table
        from sec_edgar_parser.models.thirteenf import VotingAuthority

        entry = parse_form13f_table(info_table_xml).entries[0]

        assert entry.voting_authority == VotingAuthority(sole=100, shared=0, none=0)
        assert entry.voting_authority.model_dump() == {'sole': 100, 'shared': 0, 'none': 0}

    def test_entry_fields(self, info_table_xml):
        """Should decode amounts, optional put/call and other managers."""
        from sec_edgar_parser import parse_form13f_table

        first, second = parse_form13f_table(info_table_xml).entries

        assert first.name_of_issuer == 'APPLE INC'
        assert first.value == 150000
        assert first.shares_or_principal_amount.amount == 1000
        assert first.shares_or_principal_amount.shares_or_principal_type == 'SH'
        assert first.put_call is None
        assert first.other_manager == []

        assert second.put_call == 'Put'
        assert second.investment_discretion == 'DFND'
        assert second.other_manager == [1, 2]

    def test_empty_table(self):
        """A table without rows has no entries."""
        from sec_edgar_parser import parse_form13f_table

        table = parse_form13f_table('<informationTable/>')

        assert table.entries == []
        assert table.total_value() == 0

    def test_missing_required_leaf_strict(self, info_table_xml):
        """One bad row aborts the whole table under the strict policy."""
        from sec_edgar_parser import MissingRequiredElementError, parse_form13f_table

        with pytest.raises(MissingRequiredElementError) as exc_info:
            parse_form13f_table(_without(info_table_xml, 'cusip'))

        assert exc_info.value.tag == 'cusip'
        assert exc_info.value.parent == 'infoTable'

    def test_unparseable_value_strict(self, info_table_xml):
        """Should raise TypeCoercionError for a non-integer market value."""
        from sec_edgar_parser import TypeCoercionError, parse_form13f_table

        xml = info_table_xml.replace('<value>150000</value>', '<value>150,000</value>')

        with pytest.raises(TypeCoercionError) as exc_info:
            parse_form13f_table(xml)

        assert exc_info.value.tag == 'value'
        assert exc_info.value.raw_text == '150,000'

    def test_lenient_keeps_incomplete_rows(self, info_table_xml):
        """Lenient policy keeps the row with None fields."""
        from sec_edgar_parser import ParsePolicy, parse_form13f_table

        xml = _without(info_table_xml, 'cusip').replace('<value>150000</value>', '<value>n/a</value>')

        table = parse_form13f_table(xml, policy=ParsePolicy.LENIENT)

        assert len(table.entries) == 2
        assert table.entries[0].cusip is None
        assert table.entries[0].value is None
        assert table.total_value() == 100000

    def test_policy_from_environment(self, monkeypatch, info_table_xml):
        """Should read the default policy from EDGAR_PARSER_THIRTEENF_POLICY."""
        from sec_edgar_parser import parse_form13f_table

        monkeypatch.setenv('EDGAR_PARSER_THIRTEENF_POLICY', 'lenient')

        table = parse_form13f_table(_without(info_table_xml, 'cusip'))

        assert table.entries[0].cusip is None

    def test_str_input_ignores_declared_encoding(self):
        """Decoded text is read as-is even when the declaration names another encoding."""
        from sec_edgar_parser import parse_form13f_table

        xml = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            '<informationTable><infoTable><nameOfIssuer>Nestlé</nameOfIssuer></infoTable></informationTable>'
        )

        table = parse_form13f_table(xml, policy='lenient')

        assert table.entries[0].name_of_issuer == 'Nestlé'

    def test_bytes_input_honours_declared_encoding(self):
        """Raw bytes are decoded with the encoding the declaration names."""
        from sec_edgar_parser import parse_form13f_table

        xml = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            '<informationTable><infoTable><nameOfIssuer>Nestlé</nameOfIssuer></infoTable></informationTable>'
        ).encode('iso-8859-1')

        table = parse_form13f_table(xml, policy='lenient')

        assert table.entries[0].name_of_issuer == 'Nestlé'
