"""
Reusable input validators.

Validators raise ValueError with a helpful message and return the
(normalised) input, so they can also be used with Pydantic
@field_validator.
"""

from sec_edgar_parser.config import get_forms_config


def validate_form_type(form_type: str) -> str:
    """
    Validate and normalise an EDGAR form type.

    Surrounding whitespace is removed and letters are upper-cased, so
    ' 13f-hr ' is accepted as '13F-HR'.

    Args:
        form_type: Form type as found in an EDGAR index or feed

    Returns:
        The normalised form type

    Raises:
        ValueError: If the form type is not in data/forms.yaml

    Example:
        >>> validate_form_type('4/a')
        '4/A'
        >>> validate_form_type('S-1')  # Raises ValueError
    """
    normalised = (form_type or '').strip().upper()

    config = get_forms_config()
    if config.schema_for(normalised) is None:
        supported = sorted(
            list(config.ownership) + list(config.thirteenf) + list(config.xbrl)
        )
        raise ValueError(
            f"Unsupported form type: '{form_type}'\n"
            f"Supported form types: {supported}"
        )

    return normalised
