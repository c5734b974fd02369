"""
Static configuration for the Build Viewer.

This module holds the defaults used across the library:
1.  **Catalog Location:** Where the parts catalog is fetched from when no
    override is given (Streamlit secrets or CLI flags).
2.  **Catalog Format:** Line terminator, delimiter and the special columns.
3.  **URL Format:** The query parameter and separator used to encode builds.
"""

# --- Catalog Source ---

# The catalog is plain comma-delimited text despite the extension.
DEFAULT_CATALOG_SOURCE = "AC6_partsdate-EN-WEIGHT.docx"

# Seconds to wait on the HTTP fetch before giving up.
FETCH_TIMEOUT = 10

# --- Catalog Format ---

LINE_TERMINATOR = "\r\n"
FIELD_DELIMITER = ","

# Leading row-number column. Dropped from the headers, skipped in data rows.
ROW_NUMBER_COLUMN = "No."

EN_LOAD_COLUMN = "ENLoad"
WEIGHT_COLUMN = "Weight"

# Columns parsed as floats; every other column stays a string.
NUMERIC_COLUMNS = (EN_LOAD_COLUMN, WEIGHT_COLUMN)

NAME_COLUMN = "Name"
KIND_COLUMN = "Kind"

# --- URL Format ---

BUILD_PARAM = "build"
INDEX_SEPARATOR = "-"

# --- Display ---

MISSING_STAT = "N/A"
NO_PARTS_MESSAGE = "No parts found for this build."
