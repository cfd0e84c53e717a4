"""Base formatter class for report output formats."""

from abc import ABC, abstractmethod
from typing import List
from ..models import Relationship, FinderConfig
from ..schema import Table, TableColumn


class BaseFormatter(ABC):
    """Base class for report formatters."""

    def __init__(self, config: FinderConfig):
        """Initialize formatter.

        Args:
            config: Finder configuration
        """
        self.config = config

    @abstractmethod
    def format_report(self, tables: List[Table],
                      relationships: List[Relationship]) -> str:
        """Format tables and relationships into output string.

        Args:
            tables: List of tables
            relationships: List of relationships

        Returns:
            Formatted report string
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format.

        Returns:
            File extension (e.g., '.json', '.mmd')
        """
        pass

    def validate_input(self, tables: List[Table],
                       relationships: List[Relationship]) -> None:
        """Validate input data.

        Args:
            tables: List of tables
            relationships: List of relationships

        Raises:
            ValueError: If input data is invalid
        """
        if not tables:
            raise ValueError("No tables provided")

        # Relationships refer to tables by bare name
        table_names = [table.name for table in tables]
        if len(table_names) != len(set(table_names)):
            raise ValueError("Duplicate table names found")

    def format_column_type(self, column: TableColumn) -> str:
        """Format a column's type name with its length, e.g. ``VARCHAR(20)``."""
        type_name = column.type_name or (str(column.type_code) if column.type_code is not None else "unknown")
        if column.length:
            return f"{type_name}({column.length})"
        return type_name

    def get_relationship_label(self, relationship: Relationship) -> str:
        """Get label for relationship."""
        return f"{relationship.source_column} -> {relationship.target_column}"
