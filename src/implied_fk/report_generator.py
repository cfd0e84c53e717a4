"""Builds relationship lists and renders them into reports."""

import logging
from typing import Dict, Iterable, List

from .models import FinderConfig, Relationship, RelationshipType
from .schema import ImpliedForeignKeyConstraint, Table, TableColumn
from .formatters import BaseFormatter, JSONFormatter, MermaidFormatter, PlantUMLFormatter


logger = logging.getLogger(__name__)


def _relationship_type(child: TableColumn) -> RelationshipType:
    # A child that is the whole primary key of its table can appear only once
    if child.is_primary_key and len(child.table.primary_columns) == 1:
        return RelationshipType.ONE_TO_ONE
    return RelationshipType.MANY_TO_ONE


def build_relationships(tables: Iterable[Table],
                        implied_constraints: Iterable[ImpliedForeignKeyConstraint] = ()) -> List[Relationship]:
    """Collect declared and implied relationships for reporting.

    Args:
        tables: Tables with declared foreign keys
        implied_constraints: Constraints from ``ImpliedConstraintsFinder``

    Returns:
        Declared relationships in table order, followed by implied ones
    """
    relationships = []

    for table in sorted(tables):
        for column in table.columns:
            for parent in column.parents:
                relationships.append(Relationship(
                    source_table=table.name,
                    source_column=column.name,
                    target_table=parent.table,
                    target_column=parent.column,
                    relationship_type=_relationship_type(column),
                    is_implied=False,
                    detection_method="declared",
                ))

    for constraint in implied_constraints:
        relationships.append(Relationship(
            source_table=constraint.child.table.name,
            source_column=constraint.child.name,
            target_table=constraint.parent.table.name,
            target_column=constraint.parent.name,
            relationship_type=_relationship_type(constraint.child),
            is_implied=True,
            detection_method="implied",
        ))

    return relationships


class ReportGenerator:
    """Renders tables and relationships in the configured format."""

    def __init__(self, config: FinderConfig):
        """Initialize report generator.

        Args:
            config: Finder configuration
        """
        self.config = config
        self.formatters: Dict[str, BaseFormatter] = {
            "json": JSONFormatter(config),
            "mermaid": MermaidFormatter(config),
            "plantuml": PlantUMLFormatter(config),
        }

    def generate_report(self, tables: List[Table],
                        relationships: List[Relationship]) -> str:
        """Generate a report in the configured format.

        Args:
            tables: List of tables
            relationships: List of relationships

        Returns:
            Generated report string
        """
        if not tables:
            raise ValueError("No tables provided for report generation")

        if not relationships:
            logger.warning("No relationships provided - generating tables only")

        formatter = self.formatters.get(self.config.output_format.value)
        if not formatter:
            raise ValueError(f"Unsupported output format: {self.config.output_format}")

        content = formatter.format_report(sorted(tables), relationships)

        logger.info(f"Generated report with {len(tables)} tables and {len(relationships)} relationships")
        return content

    def get_file_extension(self) -> str:
        return self.formatters[self.config.output_format.value].get_file_extension()
