"""
Pytest configuration for unit tests.

Provides sample EDGAR documents shared by the parser tests and resets the
cached parser config around every test so environment changes never leak.
"""

import pytest


XBRL_INSTANCE = """<?xml version="1.0" encoding="utf-8"?>
<xbrl xmlns="http://www.xbrl.org/2003/instance"
      xmlns:link="http://www.xbrl.org/2003/linkbase"
      xmlns:xlink="http://www.w3.org/1999/xlink"
      xmlns:xbrldi="http://xbrl.org/2006/xbrldi"
      xmlns:iso4217="http://www.xbrl.org/2003/iso4217"
      xmlns:us-gaap="http://fasb.org/us-gaap/2023"
      xmlns:dei="http://xbrl.sec.gov/dei/2023"
      xmlns:acme="http://acme.example.com/20231231">
  <link:schemaRef xlink:type="simple" xlink:href="acme-20231231.xsd"/>
  <context id="c1">
    <entity>
      <identifier scheme="http://www.sec.gov/CIK">0000012345</identifier>
    </entity>
    <period>
      <instant>2020-01-01</instant>
    </period>
  </context>
  <context id="c2">
    <entity>
      <identifier scheme="http://www.sec.gov/CIK">0000012345</identifier>
      <segment>
        <xbrldi:explicitMember dimension="us-gaap:StatementBusinessSegmentsAxis">acme:ProductMember</xbrldi:explicitMember>
      </segment>
    </entity>
    <period>
      <startDate>2020-01-01</startDate>
      <endDate>2020-12-31</endDate>
    </period>
  </context>
  <unit id="USD">
    <measure>USD</measure>
  </unit>
  <unit id="USDPerShare">
    <divide>
      <unitNumerator>
        <measure>USD</measure>
      </unitNumerator>
      <unitDenominator>
        <measure>shares</measure>
      </unitDenominator>
    </divide>
  </unit>
  <!-- balance sheet -->
  <us-gaap:Assets contextRef="c1" unitRef="USD" decimals="-3">1000000</us-gaap:Assets>
  <us-gaap:Revenues contextRef="c2" unitRef="USD" decimals="-3">250000</us-gaap:Revenues>
  <us-gaap:EarningsPerShareBasic contextRef="c2" unitRef="USDPerShare" decimals="2">1.25</us-gaap:EarningsPerShareBasic>
  <us-gaap:Liabilities contextRef="c9" unitRef="USD" decimals="-3">400000</us-gaap:Liabilities>
  <dei:EntityRegistrantName contextRef="c1">Acme Corp</dei:EntityRegistrantName>
  <dei:AmendmentFlag contextRef="c1">false</dei:AmendmentFlag>
</xbrl>
"""


FORM4_DOCUMENT = """<?xml version="1.0"?>
<ownershipDocument>
  <schemaVersion>X0508</schemaVersion>
  <documentType>4</documentType>
  <periodOfReport>2024-01-15</periodOfReport>
  <notSubjectToSection16>0</notSubjectToSection16>
  <issuer>
    <issuerCik>0000012345</issuerCik>
    <issuerName>Acme Corp</issuerName>
    <issuerTradingSymbol>ACME</issuerTradingSymbol>
  </issuer>
  <reportingOwner>
    <reportingOwnerId>
      <rptOwnerCik>0000099999</rptOwnerCik>
      <rptOwnerName>Doe Jane</rptOwnerName>
    </reportingOwnerId>
    <reportingOwnerAddress>
      <rptOwnerStreet1>1 Main Street</rptOwnerStreet1>
      <rptOwnerStreet2></rptOwnerStreet2>
      <rptOwnerCity>Springfield</rptOwnerCity>
      <rptOwnerState>IL</rptOwnerState>
      <rptOwnerZipCode>62701</rptOwnerZipCode>
    </reportingOwnerAddress>
    <reportingOwnerRelationship>
      <isDirector>1</isDirector>
      <isOfficer>true</isOfficer>
      <isTenPercentOwner>0</isTenPercentOwner>
      <officerTitle>Chief Executive Officer</officerTitle>
    </reportingOwnerRelationship>
  </reportingOwner>
  <aff10b5One>0</aff10b5One>
  <nonDerivativeTable>
    <nonDerivativeTransaction>
      <securityTitle>
        <value>Common Stock</value>
      </securityTitle>
      <transactionDate>
        <value>2024-01-15</value>
      </transactionDate>
      <transactionCoding>
        <transactionFormType>4</transactionFormType>
        <transactionCode>P</transactionCode>
        <equitySwapInvolved>0</equitySwapInvolved>
      </transactionCoding>
      <transactionTimeliness>
        <value></value>
      </transactionTimeliness>
      <transactionAmounts>
        <transactionShares>
          <value>100</value>
        </transactionShares>
        <transactionPricePerShare>
          <value>10.50</value>
          <footnoteId id="F1"/>
        </transactionPricePerShare>
        <transactionAcquiredDisposedCode>
          <value>A</value>
        </transactionAcquiredDisposedCode>
      </transactionAmounts>
      <postTransactionAmounts>
        <sharesOwnedFollowingTransaction>
          <value>1100</value>
        </sharesOwnedFollowingTransaction>
      </postTransactionAmounts>
      <ownershipNature>
        <directOrIndirectOwnership>
          <value>D</value>
        </directOrIndirectOwnership>
      </ownershipNature>
    </nonDerivativeTransaction>
    <nonDerivativeHolding>
      <securityTitle>
        <value>Common Stock</value>
      </securityTitle>
      <postTransactionAmounts>
        <sharesOwnedFollowingTransaction>
          <value>500</value>
        </sharesOwnedFollowingTransaction>
      </postTransactionAmounts>
      <ownershipNature>
        <directOrIndirectOwnership>
          <value>I</value>
        </directOrIndirectOwnership>
        <natureOfOwnership>
          <value>By Trust</value>
          <footnoteId id="F2"/>
        </natureOfOwnership>
      </ownershipNature>
    </nonDerivativeHolding>
  </nonDerivativeTable>
  <derivativeTable>
    <derivativeTransaction>
      <securityTitle>
        <value>Stock Option (right to buy)</value>
      </securityTitle>
      <conversionOrExercisePrice>
        <value>12.00</value>
      </conversionOrExercisePrice>
      <transactionDate>
        <value>2024-01-15</value>
      </transactionDate>
      <transactionCoding>
        <transactionFormType>4</transactionFormType>
        <transactionCode>A</transactionCode>
        <equitySwapInvolved>0</equitySwapInvolved>
      </transactionCoding>
      <transactionAmounts>
        <transactionShares>
          <value>2000</value>
        </transactionShares>
        <transactionPricePerShare>
          <value>0</value>
        </transactionPricePerShare>
        <transactionAcquiredDisposedCode>
          <value>A</value>
        </transactionAcquiredDisposedCode>
      </transactionAmounts>
      <expirationDate>
        <value>2034-01-15</value>
      </expirationDate>
      <underlyingSecurity>
        <underlyingSecurityTitle>
          <value>Common Stock</value>
        </underlyingSecurityTitle>
        <underlyingSecurityShares>
          <value>2000</value>
        </underlyingSecurityShares>
      </underlyingSecurity>
      <postTransactionAmounts>
        <sharesOwnedFollowingTransaction>
          <value>2000</value>
        </sharesOwnedFollowingTransaction>
      </postTransactionAmounts>
      <ownershipNature>
        <directOrIndirectOwnership>
          <value>D</value>
        </directOrIndirectOwnership>
      </ownershipNature>
    </derivativeTransaction>
  </derivativeTable>
  <footnotes>
    <footnote id="F1">Weighted average purchase price.</footnote>
    <footnote id="F2">Held by the Doe Family Trust.</footnote>
  </footnotes>
  <remarks>Exhibit 24 - Power of Attorney</remarks>
  <ownerSignature>
    <signatureName>/s/ Jane Doe</signatureName>
    <signatureDate>2024-01-17</signatureDate>
  </ownerSignature>
</ownershipDocument>
"""


FORM13F_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<edgarSubmission xmlns="http://www.sec.gov/edgar/thirteenffiler"
                 xmlns:com="http://www.sec.gov/edgar/common">
  <headerData>
    <submissionType>13F-HR</submissionType>
    <filerInfo>
      <liveTestFlag>LIVE</liveTestFlag>
      <flags>
        <confirmingCopyFlag>false</confirmingCopyFlag>
        <returnCopyFlag>true</returnCopyFlag>
        <overrideInternetFlag>false</overrideInternetFlag>
      </flags>
      <filer>
        <credentials>
          <cik>0001234567</cik>
          <ccc>XXXXXXXX</ccc>
        </credentials>
      </filer>
      <contact>
        <contactName>John Smith</contactName>
        <contactPhoneNumber>555-0100</contactPhoneNumber>
      </contact>
      <notifications>
        <notificationEmailAddress>ops@example.com</notificationEmailAddress>
        <notificationEmailAddress>compliance@example.com</notificationEmailAddress>
      </notifications>
      <periodOfReport>12-31-2023</periodOfReport>
    </filerInfo>
  </headerData>
  <formData>
    <coverPage>
      <reportCalendarOrQuarter>12-31-2023</reportCalendarOrQuarter>
      <isAmendment>false</isAmendment>
      <filingManager>
        <name>Example Capital LLC</name>
        <address>
          <com:street1>100 Park Avenue</com:street1>
          <com:city>New York</com:city>
          <com:stateOrCountry>NY</com:stateOrCountry>
          <com:zipCode>10017</com:zipCode>
        </address>
      </filingManager>
      <reportType>13F HOLDINGS REPORT</reportType>
      <form13FFileNumber>028-12345</form13FFileNumber>
      <provideInfoForInstruction5>N</provideInfoForInstruction5>
    </coverPage>
    <signatureBlock>
      <name>John Smith</name>
      <title>Chief Compliance Officer</title>
      <phone>555-0100</phone>
      <signature>/s/ John Smith</signature>
      <city>New York</city>
      <stateOrCountry>NY</stateOrCountry>
      <signatureDate>02-14-2024</signatureDate>
    </signatureBlock>
    <summaryPage>
      <otherIncludedManagersCount>1</otherIncludedManagersCount>
      <tableEntryTotal>2</tableEntryTotal>
      <tableValueTotal>250000</tableValueTotal>
      <isConfidentialOmitted>false</isConfidentialOmitted>
      <otherManagers2Info>
        <otherManager2>
          <sequenceNumber>1</sequenceNumber>
          <otherManager>
            <cik>0007654321</cik>
            <form13FFileNumber>028-54321</form13FFileNumber>
            <name>Example Advisors LP</name>
          </otherManager>
        </otherManager2>
      </otherManagers2Info>
    </summaryPage>
  </formData>
</edgarSubmission>
"""


FORM13F_TABLE = """<?xml version="1.0" encoding="UTF-8"?>
<informationTable xmlns="http://www.sec.gov/edgar/document/thirteenf/informationtable">
  <infoTable>
    <nameOfIssuer>APPLE INC</nameOfIssuer>
    <titleOfClass>COM</titleOfClass>
    <cusip>037833100</cusip>
    <value>150000</value>
    <shrsOrPrnAmt>
      <sshPrnamt>1000</sshPrnamt>
      <sshPrnamtType>SH</sshPrnamtType>
    </shrsOrPrnAmt>
    <investmentDiscretion>SOLE</investmentDiscretion>
    <votingAuthority>
      <Sole>100</Sole>
      <Shared>0</Shared>
      <None>0</None>
    </votingAuthority>
  </infoTable>
  <infoTable>
    <nameOfIssuer>MICROSOFT CORP</nameOfIssuer>
    <titleOfClass>COM</titleOfClass>
    <cusip>594918104</cusip>
    <value>100000</value>
    <shrsOrPrnAmt>
      <sshPrnamt>300</sshPrnamt>
      <sshPrnamtType>SH</sshPrnamtType>
    </shrsOrPrnAmt>
    <putCall>Put</putCall>
    <investmentDiscretion>DFND</investmentDiscretion>
    <otherManager>1,2</otherManager>
    <votingAuthority>
      <Sole>0</Sole>
      <Shared>300</Shared>
      <None>0</None>
    </votingAuthority>
  </infoTable>
</informationTable>
"""


@pytest.fixture(autouse=True)
def reset_config():
    """Drop cached ParserConfig before and after each test."""
    from sec_edgar_parser.config import reset_parser_config

    reset_parser_config()
    yield
    reset_parser_config()


@pytest.fixture
def xbrl_xml():
    return XBRL_INSTANCE


@pytest.fixture
def form4_xml():
    return FORM4_DOCUMENT


@pytest.fixture
def form13f_xml():
    return FORM13F_DOCUMENT


@pytest.fixture
def info_table_xml():
    return FORM13F_TABLE
