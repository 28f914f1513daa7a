"""Default values shared by the configuration and the extraction engine."""

# Display category for fields that point at another exported type
REFERENCE_LABEL = "Reference"

# Sheet titles are PREFIX + 1-based index
SHEET_TITLE_PREFIX = "sheet"

# Python type name -> display category
DEFAULT_TYPE_LABELS: dict[str, str] = {
    "str": "Text",
    "int": "Number",
    "float": "Number",
    "Decimal": "Number",
    "date": "Date",
    "datetime": "Date",
    "time": "Time",
}

TABLE_HEADERS = ["Table Name", "Table Description"]
FIELD_HEADERS = [
    "Field Name",
    "Field Description",
    "Is Key",
    "Field Type",
    "Remark",
    "Enum Values",
    "Linked Object",
    "Sync Type",
]

# Excel limits
MAX_SHEET_TITLE_LENGTH = 31
INVALID_SHEET_TITLE_CHARS = frozenset("[]:*?/\\")
