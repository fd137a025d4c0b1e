"""Shared type mapping utilities for Arrow types.

Maps Arrow types to the structural variable types tracked in recipe
metadata, and names to Arrow types for the cast step.
"""

import pyarrow as pa

NUMERIC = "numeric"
NOMINAL = "nominal"
LOGICAL = "logical"
DATE = "date"
OTHER = "other"

STRUCTURAL_TYPES: tuple[str, ...] = (NUMERIC, NOMINAL, LOGICAL, DATE, OTHER)

# String type names to Arrow types (used by cast step)
STRING_TO_ARROW_TYPE: dict[str, pa.DataType] = {
    "str": pa.string(),
    "string": pa.string(),
    "int": pa.int64(),
    "integer": pa.int64(),
    "float": pa.float64(),
    "double": pa.float64(),
    "bool": pa.bool_(),
    "boolean": pa.bool_(),
    "datetime": pa.timestamp("us"),
    "timestamp": pa.timestamp("us"),
    "date": pa.date32(),
}


def string_to_arrow_type(type_name: str) -> pa.DataType:
    """Convert string type name to Arrow type.

    Args:
        type_name: String type name (e.g., "int", "str", "datetime")

    Returns:
        Arrow DataType

    Raises:
        ValueError: If type_name is not supported
    """
    arrow_type = STRING_TO_ARROW_TYPE.get(type_name.lower())
    if arrow_type is None:
        raise ValueError(
            f"Unsupported type name: {type_name}. "
            f"Supported types: {list(STRING_TO_ARROW_TYPE.keys())}"
        )
    return arrow_type


def arrow_type_to_structural(arrow_type: pa.DataType) -> str:
    """Classify an Arrow type as numeric, nominal, logical, date or other.

    Dictionary-encoded columns are nominal regardless of their value type.
    """
    if pa.types.is_dictionary(arrow_type):
        return NOMINAL
    if (
        pa.types.is_integer(arrow_type)
        or pa.types.is_floating(arrow_type)
        or pa.types.is_decimal(arrow_type)
    ):
        return NUMERIC
    if pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
        return NOMINAL
    if pa.types.is_boolean(arrow_type):
        return LOGICAL
    if pa.types.is_date(arrow_type) or pa.types.is_timestamp(arrow_type):
        return DATE
    return OTHER
