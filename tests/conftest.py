"""
Shared test fixtures.
"""

import sys
from io import BytesIO
from pathlib import Path

# Add project root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import pandas as pd
import pytest

from warehouse_lookup import create_app
from warehouse_lookup.services import inventory_service


# ===================
# APP / CLIENT
# ===================

@pytest.fixture(autouse=True)
def reset_sessions():
    """Each test starts with no per-session or cached default catalogs."""
    inventory_service.SESSIONS.clear()
    inventory_service._DEFAULT_CATALOGS.clear()
    yield
    inventory_service.SESSIONS.clear()
    inventory_service._DEFAULT_CATALOGS.clear()


@pytest.fixture
def app():
    """Flask app with the testing config (no sample catalog)."""
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


# ===================
# SPREADSHEETS
# ===================

def build_workbook(rows, extra_sheets=None) -> bytes:
    """Build an .xlsx file in memory. First sheet holds `rows`."""
    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name="Склад", index=False)
        for name, sheet_rows in (extra_sheets or {}).items():
            pd.DataFrame(sheet_rows).to_excel(writer, sheet_name=name, index=False)
    return output.getvalue()


@pytest.fixture
def make_workbook():
    return build_workbook


@pytest.fixture
def phone_row() -> dict:
    return {
        "ID": 1,
        "Артикул": "SM-001",
        "Название": "Phone",
        "Ячейка": "A-12",
        "Количество": 45,
        "Зона": "A",
    }


@pytest.fixture
def warehouse_rows() -> list:
    return [
        {"ID": 1, "Артикул": "SM-001", "Название": "Смартфон Samsung", "Ячейка": "A-12", "Количество": 45, "Зона": "A"},
        {"ID": 2, "Артикул": "LP-003", "Название": "Ноутбук Lenovo", "Ячейка": "A-08", "Количество": 12, "Зона": "A"},
        {"ID": 3, "Артикул": "SN-045", "Название": "Наушники Sony", "Ячейка": "B-23", "Количество": 78, "Зона": "B"},
        {"ID": 4, "Артикул": "DL-089", "Название": "Монитор Dell", "Ячейка": "C-05", "Количество": 19, "Зона": "C"},
    ]
