"""
Configuration management using Pydantic Settings.

Provides type-safe access to:
- Parse policies per document family (environment / .env driven)
- EDGAR form type table (loaded from data/forms.yaml)
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParsePolicy(str, Enum):
    """
    Failure policy applied to one whole document.

    STRICT: the first missing required element or unparseable required
        leaf aborts the parse.
    LENIENT: every field is treated as optional; only malformed XML (and
        broken XBRL contexts) abort.
    """

    STRICT = 'strict'
    LENIENT = 'lenient'


class ParserConfig(BaseSettings):
    """
    Parser behaviour loaded from environment variables.

    Environment Variables (from .env):
        EDGAR_PARSER_OWNERSHIP_POLICY: 'strict' or 'lenient' (default lenient)
        EDGAR_PARSER_THIRTEENF_POLICY: 'strict' or 'lenient' (default strict)
        EDGAR_PARSER_STRICT_REFERENCES: raise on unresolved contextRef/unitRef
        EDGAR_PARSER_HUGE_TREE: lift lxml size limits for very large filings (default true)

    Example:
        >>> config = get_parser_config()
        >>> config.thirteenf_policy
        <ParsePolicy.STRICT: 'strict'>
    """

    ownership_policy: ParsePolicy = Field(
        default=ParsePolicy.LENIENT,
        description="Policy for Forms 3/4/5 ownership documents"
    )

    thirteenf_policy: ParsePolicy = Field(
        default=ParsePolicy.STRICT,
        description="Policy for 13F primary documents and information tables"
    )

    strict_references: bool = Field(
        default=False,
        description="Raise UnresolvedReferenceError instead of dropping facts "
                    "whose contextRef (or leaving None where unitRef) does not resolve"
    )

    huge_tree: bool = Field(
        default=True,
        description="Disable lxml security limits on tree depth and text size"
    )

    model_config = SettingsConfigDict(
        env_prefix='EDGAR_PARSER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )


# Singleton pattern - loaded once, cached forever
_parser_config: Optional[ParserConfig] = None


def get_parser_config() -> ParserConfig:
    """
    Get global parser config instance (lazy-loaded singleton).

    Returns:
        Singleton ParserConfig instance
    """
    global _parser_config
    if _parser_config is None:
        _parser_config = ParserConfig()
    return _parser_config


def reset_parser_config() -> None:
    """Drop the cached ParserConfig so the next access re-reads the environment."""
    global _parser_config
    _parser_config = None


FORMS_PATH = Path(__file__).parent / 'data' / 'forms.yaml'


class FormTypesConfig(BaseSettings):
    """
    EDGAR form types grouped by the schema family that decodes them.

    Loaded from data/forms.yaml:

        ownership:
          '4': Statement of changes in beneficial ownership
        thirteenf:
          13F-HR: Institutional investment manager holdings report
        xbrl:
          10-K: Annual report (XBRL instance)

    Attributes:
        ownership: Form types decoded by the ownership schema
        thirteenf: Form types decoded by the 13F schema
        xbrl: Form types whose primary financial data is an XBRL instance

    Example:
        >>> config = FormTypesConfig()
        >>> config.schema_for('4/A')
        'ownership'
    """

    ownership: Dict[str, str] = Field(
        default_factory=dict,
        description="Ownership form types (3, 4, 5 and amendments)"
    )
    thirteenf: Dict[str, str] = Field(
        default_factory=dict,
        description="13F form types"
    )
    xbrl: Dict[str, str] = Field(
        default_factory=dict,
        description="Form types filed with an XBRL instance document"
    )

    model_config = SettingsConfigDict(
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Load data/forms.yaml if no values were provided.

        Explicit values (e.g. from tests) take precedence over the file.
        """
        if data:
            return data

        if not FORMS_PATH.exists():
            raise FileNotFoundError(
                f"Form types file not found at {FORMS_PATH}. "
                f"Ensure the package data was installed."
            )

        with open(FORMS_PATH, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        # YAML turns bare numeric keys like 3 into ints
        return {
            family: {str(code): desc for code, desc in (yaml_data.get(family) or {}).items()}
            for family in ('ownership', 'thirteenf', 'xbrl')
        }

    def schema_for(self, form_type: str) -> Optional[str]:
        """
        Schema family that decodes a form type.

        Returns:
            'ownership', 'thirteenf', 'xbrl', or None if unknown
        """
        for family in ('ownership', 'thirteenf', 'xbrl'):
            if form_type in getattr(self, family):
                return family
        return None

    def get_form_description(self, form_type: str) -> str:
        """
        Raises:
            KeyError: If the form type is not configured
        """
        family = self.schema_for(form_type)
        if family is None:
            raise KeyError(f"Unknown form type: {form_type}")
        return getattr(self, family)[form_type]


_forms_config: Optional[FormTypesConfig] = None


def get_forms_config() -> FormTypesConfig:
    """Get global form types config instance (lazy-loaded singleton)."""
    global _forms_config
    if _forms_config is None:
        _forms_config = FormTypesConfig()
    return _forms_config
