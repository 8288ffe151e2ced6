"""
Pydantic models for XBRL instance documents.

Design:
- A Fact carries its own copy of the Context it references
- Only the dimensional subset used by EDGAR (explicit members) is modelled
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from sec_edgar_parser.models.values import Value


class Period(BaseModel):
    """
    Reporting period of a context.

    Either ``instant`` or ``start_date``/``end_date`` is normally set; a
    period with all three absent is legal and simply carries no dates.
    """

    instant: Optional[str] = Field(default=None, examples=["2020-01-01"])
    start_date: Optional[str] = Field(default=None, examples=["2020-01-01"])
    end_date: Optional[str] = Field(default=None, examples=["2020-12-31"])

    model_config = ConfigDict(frozen=True)

    @property
    def is_instant(self) -> bool:
        return self.instant is not None

    @property
    def is_duration(self) -> bool:
        return self.start_date is not None or self.end_date is not None


class Segment(BaseModel):
    """One explicit dimension member, namespace prefixes removed."""

    dimension: str = Field(..., examples=["StatementBusinessSegmentsAxis"])
    member: str = Field(..., examples=["ProductMember"])

    model_config = ConfigDict(frozen=True)


class Context(BaseModel):
    """
    Entity, dimensional segments and period qualifying a fact.

    Example:
        >>> Context(entity='0000012345', period=Period(instant='2020-01-01'))
    """

    entity: str = Field(..., description="Entity identifier (usually a CIK)")
    segments: List[Segment] = Field(
        default_factory=list,
        description="Explicit members in document order"
    )
    period: Period = Field(default_factory=Period)

    model_config = ConfigDict(frozen=True)


class Fact(BaseModel):
    """
    A reported value joined against its context and unit.

    Example:
        >>> fact.concept, fact.value, fact.unit
        ('Assets', IntValue(kind='int', value=1000000), 'USD')
    """

    context: Context
    concept: str = Field(..., description="Element local name", examples=["Assets"])
    value: Value
    decimals: Optional[str] = Field(default=None, examples=["-3", "INF"])
    unit: Optional[str] = Field(
        default=None,
        description="Resolved measure, 'numerator/denominator' for ratios",
        examples=["USD", "USD/shares"]
    )

    model_config = ConfigDict(frozen=True)


class XbrlDocument(BaseModel):
    """Facts of one instance document, in source document order."""

    facts: List[Fact] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def facts_for(self, concept: str) -> List[Fact]:
        """All facts reported for a concept, in document order."""
        return [fact for fact in self.facts if fact.concept == concept]

    def __repr__(self) -> str:
        return f"XbrlDocument(facts={len(self.facts)})"
