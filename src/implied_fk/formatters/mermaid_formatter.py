"""Mermaid formatter for relationship reports."""

import re
from typing import List
from .base_formatter import BaseFormatter
from ..models import Relationship
from ..schema import Table, TableColumn


class MermaidFormatter(BaseFormatter):
    """Formatter for Mermaid ER diagrams.

    Declared relationships are drawn with solid lines, implied ones dotted.
    """

    def format_report(self, tables: List[Table],
                      relationships: List[Relationship]) -> str:
        """Format tables and relationships into Mermaid syntax.

        Args:
            tables: List of tables
            relationships: List of relationships

        Returns:
            Mermaid ERD string
        """
        self.validate_input(tables, relationships)

        lines = ["erDiagram"]

        for table in tables:
            lines.append(f"    {self._get_entity_name(table.name)} {{")
            for column in table.columns:
                lines.append(f"        {self._format_mermaid_column(column)}")
            lines.append("    }")
            lines.append("")  # Empty line between tables

        for relationship in relationships:
            lines.append(f"    {self._format_mermaid_relationship(relationship)}")

        return "\n".join(lines)

    def _get_entity_name(self, table_name: str) -> str:
        return re.sub(r'[^A-Za-z0-9_]', '_', table_name)

    def _format_mermaid_column(self, column: TableColumn) -> str:
        parts = []

        # Mermaid attribute types cannot contain parentheses
        if self.config.show_column_types:
            parts.append(re.sub(r'[^A-Za-z0-9_]', '_', self.format_column_type(column)).strip('_').lower())
        else:
            parts.append("string")

        parts.append(column.name)

        keys = []
        if column.is_primary_key:
            keys.append("PK")
        if column.is_foreign_key:
            keys.append("FK")
        if keys:
            parts.append(", ".join(keys))

        return " ".join(parts)

    def _format_mermaid_relationship(self, relationship: Relationship) -> str:
        line = ".." if relationship.is_implied else "--"
        type_mapping = {
            "one_to_one": "||{}||",
            "many_to_one": "}}o{}||",
        }
        connector = type_mapping.get(relationship.relationship_type.value, "}}o{}||").format(line)

        source = self._get_entity_name(relationship.source_table)
        target = self._get_entity_name(relationship.target_table)
        return f'{source} {connector} {target} : "{self.get_relationship_label(relationship)}"'

    def get_file_extension(self) -> str:
        """Get file extension for Mermaid format."""
        return ".mmd"
