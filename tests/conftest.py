"""Shared fixtures for implied_fk tests."""

import json

import pytest

from implied_fk.schema import Table

from .factories import INTEGER, VARCHAR, int_column, varchar_column


@pytest.fixture
def customer_order_tables():
    """Customer(Id) and Order(OrderId, CustomerId) without declared keys between them."""
    customer = Table(name="Customer", columns=[
        int_column("Id", is_primary_key=True),
        varchar_column("Name", 100),
    ])
    order = Table(name="Order", columns=[
        int_column("OrderId", is_primary_key=True),
        int_column("CustomerId"),
    ])
    return [customer, order]


@pytest.fixture
def sample_document():
    """Schema document with one declared and one implied relationship."""
    return {
        "tables": [
            {
                "name": "Customer",
                "columns": [
                    {"name": "Id", "type_code": INTEGER, "type_name": "INT", "length": 4, "nullable": False},
                    {"name": "Name", "type_code": VARCHAR, "type_name": "VARCHAR", "length": 100},
                ],
                "primary_key": ["Id"],
            },
            {
                "name": "Product",
                "columns": [
                    {"name": "ProductKey", "type_code": VARCHAR, "type_name": "VARCHAR", "length": 20,
                     "is_primary_key": True},
                ],
            },
            {
                "name": "Order",
                "columns": [
                    {"name": "OrderId", "type_code": INTEGER, "type_name": "INT", "length": 4,
                     "is_primary_key": True},
                    {"name": "CustomerId", "type_code": INTEGER, "type_name": "INT", "length": 4},
                    {"name": "line_ProductKey", "type_code": VARCHAR, "type_name": "VARCHAR", "length": 20},
                ],
                "foreign_keys": [
                    {"name": "fk_order_product", "column": "line_ProductKey",
                     "parent_table": "Product", "parent_column": "ProductKey"},
                ],
            },
        ]
    }


@pytest.fixture
def schema_file(tmp_path, sample_document):
    """Sample document written to a JSON file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


ENV_KEYS = [
    "SCHEMA_FILE", "EXCLUDED_COLUMN_NAME", "INCLUDE_IMPLIED", "EXCLUDE_IMPLIED_PATTERN",
    "OUTPUT_FORMAT", "OUTPUT_FILE", "SHOW_COLUMN_TYPES", "LOG_LEVEL", "LOG_FILE",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove configuration variables and run from an empty directory.

    Variables are registered with monkeypatch first so values loaded from
    .env files during the test are removed afterwards.
    """
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
