"""
Discovery helper for EDGAR form types.

Provides a user-facing API to explore which form types the parser can
decode and which schema family handles each, from data/forms.yaml.
"""

from typing import Dict

from sec_edgar_parser.config import get_forms_config


class FormTypes:
    """
    Helper class for discovering supported EDGAR form types.

    All methods return copies so callers cannot mutate the loaded config.

    Example:
        >>> FormTypes.list_by_schema('ownership')
        {'3': 'Initial statement of beneficial ownership of securities', ...}

        >>> FormTypes.schema_for('13F-HR')
        'thirteenf'

        >>> FormTypes.is_valid('S-1')
        False
    """

    SCHEMAS = ('ownership', 'thirteenf', 'xbrl')

    @staticmethod
    def list_available() -> Dict[str, str]:
        """
        List every supported form type with its description.

        Returns:
            Dictionary mapping form type to description
        """
        config = get_forms_config()
        available = {}
        for schema in FormTypes.SCHEMAS:
            available.update(getattr(config, schema))
        return available

    @staticmethod
    def list_by_schema(schema: str) -> Dict[str, str]:
        """
        List form types decoded by one schema family.

        Args:
            schema: 'ownership', 'thirteenf' or 'xbrl'

        Raises:
            ValueError: If schema is not a known family
        """
        if schema not in FormTypes.SCHEMAS:
            raise ValueError(
                f"Unknown schema: {schema}. Available schemas: {list(FormTypes.SCHEMAS)}"
            )
        return getattr(get_forms_config(), schema).copy()

    @staticmethod
    def schema_for(form_type: str) -> str:
        """
        Schema family that decodes a form type.

        Raises:
            ValueError: If the form type is not supported
        """
        schema = get_forms_config().schema_for(form_type)
        if schema is None:
            raise ValueError(f"Unknown form type: {form_type}")
        return schema

    @staticmethod
    def get_description(form_type: str) -> str:
        """
        Raises:
            ValueError: If the form type is not supported
        """
        try:
            return get_forms_config().get_form_description(form_type)
        except KeyError as e:
            raise ValueError(f"Unknown form type: {form_type}") from e

    @staticmethod
    def is_valid(form_type: str) -> bool:
        return get_forms_config().schema_for(form_type) is not None
