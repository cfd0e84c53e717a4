"""Implied FK - find undeclared foreign keys from column names, types and lengths."""

__version__ = "0.1.0"

from .schema import Table, TableColumn, ColumnRef, KeySignature, ImpliedForeignKeyConstraint
from .models import FinderConfig, Relationship, SchemaDocument
from .implied_constraints_finder import ImpliedConstraintsFinder, DEFAULT_EXCLUDED_COLUMN_NAME
from .schema_loader import SchemaLoader, SchemaLoadError
from .report_generator import ReportGenerator, build_relationships

__all__ = [
    "Table",
    "TableColumn",
    "ColumnRef",
    "KeySignature",
    "ImpliedForeignKeyConstraint",
    "FinderConfig",
    "Relationship",
    "SchemaDocument",
    "ImpliedConstraintsFinder",
    "DEFAULT_EXCLUDED_COLUMN_NAME",
    "SchemaLoader",
    "SchemaLoadError",
    "ReportGenerator",
    "build_relationships",
]
