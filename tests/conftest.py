import pytest

CATALOG_TEXT = (
    "No.,Name,Kind,ENLoad,Weight\r\n"
    "1,Leg,Light,10,5\r\n"
    "2,Core,Medium,250.5,20000\r\n"
    "3,Booster,Light,0,N/A\r\n"
)


class RecordingSink:
    """Render sink that records every call for assertions."""

    def __init__(self):
        self.calls = []
        self.parts = []
        self.totals = None
        self.errors = []
        self.loading = False

    def reset(self):
        self.calls.append("reset")
        self.parts = []
        self.totals = None
        self.errors = []

    def set_loading(self, active):
        self.calls.append(f"loading:{active}")
        self.loading = active

    def add_part(self, part):
        self.calls.append("part")
        self.parts.append(part)

    def set_totals(self, en_load, weight):
        self.calls.append("totals")
        self.totals = (en_load, weight)

    def show_error(self, message):
        self.calls.append("error")
        self.errors.append(message)


@pytest.fixture
def catalog_text():
    """Three-part catalog with a row-number column."""
    return CATALOG_TEXT


@pytest.fixture
def catalog_file(tmp_path):
    """Writes the sample catalog to disk with CRLF terminators intact.

    Returns:
        str: Path to the catalog file.
    """
    path = tmp_path / "catalog.csv"
    path.write_bytes(CATALOG_TEXT.encode("utf-8"))
    return str(path)


@pytest.fixture
def sink():
    return RecordingSink()
