"""PlantUML formatter for relationship reports."""

from typing import List
from .base_formatter import BaseFormatter
from ..models import Relationship
from ..schema import Table, TableColumn


class PlantUMLFormatter(BaseFormatter):
    """Formatter for PlantUML ER diagrams."""

    def format_report(self, tables: List[Table],
                      relationships: List[Relationship]) -> str:
        """Format tables and relationships into PlantUML syntax.

        Args:
            tables: List of tables
            relationships: List of relationships

        Returns:
            PlantUML ERD string
        """
        self.validate_input(tables, relationships)

        lines = ["@startuml ERD"]
        lines.append("!theme plain")
        lines.append("")

        for table in tables:
            lines.append(f"entity \"{table.name}\" as {self._get_entity_name(table.name)} {{")
            for column in table.columns:
                lines.append(f"    {self._format_plantuml_column(column)}")
            lines.append("}")
            lines.append("")  # Empty line between tables

        for relationship in relationships:
            lines.append(self._format_plantuml_relationship(relationship))

        lines.append("@enduml")

        return "\n".join(lines)

    def _get_entity_name(self, table_name: str) -> str:
        """Convert a table name to a valid PlantUML identifier."""
        return table_name.replace("-", "_").replace(" ", "_").replace(".", "_").lower()

    def _format_plantuml_column(self, column: TableColumn) -> str:
        parts = []

        if column.is_primary_key:
            parts.append("*")
        if column.is_foreign_key:
            parts.append("~")

        parts.append(column.name)

        if self.config.show_column_types:
            parts.append(": " + self.format_column_type(column))

        if not column.nullable:
            parts.append("NOT NULL")

        return " ".join(parts)

    def _format_plantuml_relationship(self, relationship: Relationship) -> str:
        source_entity = self._get_entity_name(relationship.source_table)
        target_entity = self._get_entity_name(relationship.target_table)

        line = ".." if relationship.is_implied else "--"
        type_mapping = {
            "one_to_one": "||{}||",
            "many_to_one": "}}o{}||",
        }
        connector = type_mapping.get(relationship.relationship_type.value, "}}o{}||").format(line)

        return f"{source_entity} {connector} {target_entity} : {self.get_relationship_label(relationship)}"

    def get_file_extension(self) -> str:
        """Get file extension for PlantUML format."""
        return ".puml"
