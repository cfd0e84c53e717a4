"""Pydantic data models for the implied foreign key tool."""

import re
from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field, field_validator, model_validator


class OutputFormat(str, Enum):
    """Supported report formats."""
    JSON = "json"
    MERMAID = "mermaid"
    PLANTUML = "plantuml"


class RelationshipType(str, Enum):
    """Types of relationships between tables."""
    ONE_TO_ONE = "one_to_one"
    MANY_TO_ONE = "many_to_one"


class DisableImpliedKeys(str, Enum):
    """Which side of implied relationships a column opts out of."""
    TO = "to"
    FROM = "from"
    ALL = "all"


class ColumnInfo(BaseModel):
    """Column description from a schema document."""
    name: str = Field(..., min_length=1, description="Column name")
    type_code: Optional[int] = Field(None, description="JDBC style numeric type code")
    type_name: Optional[str] = Field(None, description="Database type name")
    length: int = Field(default=0, ge=0, description="Declared column length")
    nullable: bool = Field(default=True, description="Whether the column accepts NULL")
    is_primary_key: bool = Field(default=False, description="Whether this is a primary key column")
    disable_implied_keys: Optional[DisableImpliedKeys] = Field(
        None, description="Opt this column out of implied relationships")


class ForeignKeyInfo(BaseModel):
    """Declared foreign key from one column to a column of a parent table."""
    name: Optional[str] = Field(None, description="Constraint name")
    column: str = Field(..., description="Child column name")
    parent_table: str = Field(..., description="Parent table name")
    parent_column: str = Field(..., description="Parent column name")


class TableSchema(BaseModel):
    """Table description from a schema document."""
    name: str = Field(..., min_length=1, description="Table name")
    schema_name: Optional[str] = Field(None, description="Schema or dataset owning the table")
    columns: List[ColumnInfo] = Field(default_factory=list, description="Table columns")
    primary_key: List[str] = Field(default_factory=list, description="Primary key columns in key order")
    foreign_keys: List[ForeignKeyInfo] = Field(default_factory=list, description="Declared foreign keys")

    @model_validator(mode='after')
    def validate_column_references(self):
        """Validate column names and the columns keys refer to."""
        names = [column.name for column in self.columns]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate column names in table {self.name}")
        for key_column in self.primary_key:
            if key_column not in names:
                raise ValueError(f"Primary key column {key_column} not found in table {self.name}")
        for foreign_key in self.foreign_keys:
            if foreign_key.column not in names:
                raise ValueError(f"Foreign key column {foreign_key.column} not found in table {self.name}")
        return self


class SchemaDocument(BaseModel):
    """A set of tables to analyze."""
    tables: List[TableSchema] = Field(default_factory=list)

    @field_validator('tables')
    @classmethod
    def validate_unique_tables(cls, v):
        """Validate table names are unique across schemas.

        Foreign keys, column references and diagram entities use bare table names.
        """
        names = [table.name for table in v]
        if len(names) != len(set(names)):
            raise ValueError("Duplicate table names found")
        return v


class Relationship(BaseModel):
    """Relationship between a child column and a parent column."""
    source_table: str = Field(..., description="Child table name")
    source_column: str = Field(..., description="Child column name")
    target_table: str = Field(..., description="Parent table name")
    target_column: str = Field(..., description="Parent column name")
    relationship_type: RelationshipType = Field(default=RelationshipType.MANY_TO_ONE)
    is_implied: bool = Field(default=False, description="Whether the relationship was inferred")
    detection_method: str = Field(default="declared", description="How the relationship was found")


class FinderConfig(BaseModel):
    """Configuration for implied key detection and reporting."""
    # Input
    schema_file: Optional[str] = Field(None, description="Path to schema JSON document")

    # Detection
    excluded_column_name: Optional[str] = Field(
        default="LanguageId", description="Column name left out of implied key detection")
    include_implied: bool = Field(default=True, description="Detect implied relationships")
    exclude_implied_pattern: Optional[str] = Field(
        None, description="Regex over table.column names excluded from implied relationships")

    # Output
    output_format: OutputFormat = Field(default=OutputFormat.MERMAID, description="Report format")
    output_file: Optional[str] = Field(None, description="Output file path, stdout if unset")
    show_column_types: bool = Field(default=True, description="Show column data types")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(None, description="Log file path")

    @field_validator('excluded_column_name')
    @classmethod
    def validate_excluded_column_name(cls, v):
        """Treat an empty excluded name as no exclusion."""
        return v or None

    @field_validator('exclude_implied_pattern')
    @classmethod
    def validate_exclude_implied_pattern(cls, v):
        """Validate the exclusion regex compiles."""
        if v:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid exclude pattern {v!r}: {e}")
        return v or None

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()
