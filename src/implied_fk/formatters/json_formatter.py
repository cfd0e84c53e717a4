"""JSON formatter for relationship reports."""

import json
from typing import List
from .base_formatter import BaseFormatter
from ..models import Relationship
from ..schema import Table


class JSONFormatter(BaseFormatter):
    """Formatter writing tables and relationships as a JSON document."""

    def format_report(self, tables: List[Table],
                      relationships: List[Relationship]) -> str:
        self.validate_input(tables, relationships)

        document = {
            "tables": [self._table_to_dict(table) for table in tables],
            "relationships": [relationship.model_dump(mode='json') for relationship in relationships],
        }
        return json.dumps(document, indent=2)

    def _table_to_dict(self, table: Table) -> dict:
        columns = []
        for column in table.columns:
            entry = {
                "name": column.name,
                "is_primary_key": column.is_primary_key,
                "is_foreign_key": column.is_foreign_key,
            }
            if self.config.show_column_types:
                entry["type"] = self.format_column_type(column)
            columns.append(entry)

        return {
            "name": table.name,
            "schema_name": table.schema_name,
            "primary_key": [column.name for column in table.primary_columns],
            "columns": columns,
        }

    def get_file_extension(self) -> str:
        return ".json"
