"""Loads schema documents into linked tables and columns."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .models import SchemaDocument, TableSchema, ColumnInfo, ForeignKeyInfo, DisableImpliedKeys
from .schema import Table, TableColumn


logger = logging.getLogger(__name__)


class SchemaLoadError(ValueError):
    """Raised when a schema document cannot be loaded."""


class SchemaLoader:
    """Builds ``Table`` objects from schema documents."""

    def __init__(self, exclude_implied_pattern: Optional[str] = None):
        """Initialize schema loader.

        Args:
            exclude_implied_pattern: Regex matched against ``table.column``;
                matching columns take no part in implied relationships
        """
        self.exclude_implied_pattern = re.compile(exclude_implied_pattern) if exclude_implied_pattern else None

    def load_file(self, path: Union[str, Path]) -> List[Table]:
        """Load tables from a JSON schema document.

        Args:
            path: Path to the schema file

        Returns:
            List of tables

        Raises:
            SchemaLoadError: If the file is missing or invalid
        """
        path = Path(path)
        if not path.exists():
            raise SchemaLoadError(f"Schema file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in schema file {path}: {e}")
            raise SchemaLoadError(f"Error reading schema file {path}: {e}")

        tables = self.load_document(data)
        logger.info(f"Loaded {len(tables)} tables from {path}")
        return tables

    def load_document(self, document: Union[SchemaDocument, Dict[str, Any]]) -> List[Table]:
        """Build linked tables from a schema document.

        Args:
            document: SchemaDocument or its dictionary form

        Returns:
            List of tables in document order

        Raises:
            SchemaLoadError: If the document is invalid or a foreign key
                refers to an unknown table or column
        """
        if not isinstance(document, SchemaDocument):
            try:
                document = SchemaDocument.model_validate(document)
            except ValidationError as e:
                logger.error(f"Schema document failed validation: {e}")
                raise SchemaLoadError(f"Invalid schema document: {e}")

        tables = [self._build_table(table_schema) for table_schema in document.tables]
        table_map = {table.name: table for table in tables}

        for table_schema, table in zip(document.tables, tables):
            for foreign_key in table_schema.foreign_keys:
                self._link_foreign_key(table, foreign_key, table_map)

        if self.exclude_implied_pattern:
            for table in tables:
                for column in table.columns:
                    if self.exclude_implied_pattern.fullmatch(str(column.ref)):
                        logger.debug(f"Excluding {column.ref} from implied relationships")
                        column.disable_implied_keys()

        return tables

    def _build_table(self, table_schema: TableSchema) -> Table:
        columns = [self._build_column(column_info) for column_info in table_schema.columns]
        return Table(
            name=table_schema.name,
            schema_name=table_schema.schema_name,
            columns=columns,
            primary_key=list(table_schema.primary_key),
        )

    def _build_column(self, column_info: ColumnInfo) -> TableColumn:
        disabled = column_info.disable_implied_keys
        return TableColumn(
            name=column_info.name,
            type_code=column_info.type_code,
            type_name=column_info.type_name,
            length=column_info.length,
            nullable=column_info.nullable,
            is_primary_key=column_info.is_primary_key,
            allows_implied_parents=disabled not in (DisableImpliedKeys.FROM, DisableImpliedKeys.ALL),
            allows_implied_children=disabled not in (DisableImpliedKeys.TO, DisableImpliedKeys.ALL),
        )

    def _link_foreign_key(self, table: Table, foreign_key: ForeignKeyInfo, table_map: Dict[str, Table]) -> None:
        parent_table = table_map.get(foreign_key.parent_table)
        if parent_table is None:
            raise SchemaLoadError(
                f"Foreign key {table.name}.{foreign_key.column} refers to unknown table {foreign_key.parent_table}")
        parent = parent_table.get_column(foreign_key.parent_column)
        if parent is None:
            raise SchemaLoadError(
                f"Foreign key {table.name}.{foreign_key.column} refers to unknown column "
                f"{foreign_key.parent_table}.{foreign_key.parent_column}")

        child = table.get_column(foreign_key.column)
        child.is_foreign_key = True
        child.parents.append(parent.ref)
        parent.children.append(child.ref)
