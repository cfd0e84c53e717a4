"""Finds implied foreign key constraints between tables."""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .matching import name_matches, type_matches
from .schema import ImpliedForeignKeyConstraint, KeySignature, Table, TableColumn


logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_COLUMN_NAME = "LanguageId"


def is_orphan(column: TableColumn, excluded_name: Optional[str] = DEFAULT_EXCLUDED_COLUMN_NAME) -> bool:
    """Check if a column has no declared parent and may be given an implied one.

    Args:
        column: Column to check
        excluded_name: Column name never considered for implied keys

    Returns:
        True if the column is an orphan
    """
    return (bool(column.name)
            and not column.is_foreign_key
            and not column.is_primary_key
            and column.allows_implied_parents
            and not (excluded_name and column.name == excluded_name))


def by_table_and_column(column: TableColumn) -> Tuple:
    """Sort key ordering columns by table, then case-insensitive column name."""
    return (column.table.sort_key, (column.name or "").lower())


class PrimaryKeyIndex(dict):
    """Primary key signatures mapped to the table owning them.

    When several tables share a signature the last one is kept as the value;
    the replaced tables are remembered in ``shadowed`` so that matches
    against them can still be recognized as ambiguous.
    """

    def __init__(self):
        super().__init__()
        self.shadowed: Dict[KeySignature, List[Table]] = {}

    def add(self, signature: KeySignature, table: Table) -> None:
        previous = self.get(signature)
        if previous is not None and previous is not table:
            logger.debug(f"Primary key signature {signature} of {previous.name} replaced by {table.name}")
            self.shadowed.setdefault(signature, []).append(previous)
        self[signature] = table


def tables_for(index: Dict[KeySignature, Table], signature: KeySignature) -> List[Table]:
    """All tables with this signature, the indexed one first.

    Plain dictionaries hold a single table per signature.
    """
    return [index[signature]] + getattr(index, "shadowed", {}).get(signature, [])


def build_primary_key_index(tables: Iterable[Table],
                            excluded_name: Optional[str] = DEFAULT_EXCLUDED_COLUMN_NAME) -> PrimaryKeyIndex:
    """Map the primary key signature of each eligible table to that table.

    A table is eligible when it has a single primary key column, or a
    composite key that includes the excluded column. Only the first key
    column is used. Identical signatures replace earlier ones.

    Args:
        tables: Tables to index
        excluded_name: Column name never considered for implied keys

    Returns:
        PrimaryKeyIndex of key signature to owning table
    """
    index = PrimaryKeyIndex()

    for table in tables:
        primary_columns = table.primary_columns
        if not primary_columns:
            continue
        if len(primary_columns) > 1 and not any(
                excluded_name and column.name == excluded_name for column in primary_columns):
            continue

        column = primary_columns[0]
        if not column.allows_implied_children:
            continue

        index.add(KeySignature.of(column), table)

    return index


def find_primary_table(orphan: KeySignature, index: Dict[KeySignature, Table]) -> Optional[Table]:
    """Find the single table whose primary key the orphan column may reference.

    Args:
        orphan: Signature of the orphan column
        index: Primary key index from ``build_primary_key_index``

    Returns:
        The matching table, or None if nothing or more than one table matches
    """
    primary_table = None
    for signature in sorted(index):
        table = index[signature]
        if not (name_matches(orphan.name, signature.name, table.name)
                and type_matches(orphan, signature)):
            continue

        candidates = [t for t in tables_for(index, signature)
                      if name_matches(orphan.name, signature.name, t.name)]

        for candidate in candidates:
            if primary_table is not None and primary_table is not candidate:
                logger.debug(f"Column {orphan.name} matches both {primary_table.name} and {candidate.name}, skipping")
                return None
            primary_table = candidate
    return primary_table


class ImpliedConstraintsFinder:
    """Finds columns that look like foreign keys but are not declared as such."""

    def __init__(self, excluded_column_name: Optional[str] = DEFAULT_EXCLUDED_COLUMN_NAME):
        """Initialize finder.

        Args:
            excluded_column_name: Column name left out of all inference.
                None or empty disables the exclusion.
        """
        self.excluded_column_name = excluded_column_name

    def find(self, tables: Iterable[Table]) -> List[ImpliedForeignKeyConstraint]:
        """Find implied foreign key constraints.

        Args:
            tables: Tables to analyze

        Returns:
            Implied constraints in (table, column name) order of the child
        """
        tables = list(tables)
        orphans = sorted(
            (column for table in tables for column in table.columns
             if is_orphan(column, self.excluded_column_name)),
            key=by_table_and_column,
        )
        index = build_primary_key_index(tables, self.excluded_column_name)
        logger.debug(f"Found {len(orphans)} orphan columns and {len(index)} indexed primary keys")

        constraints = []
        for child in orphans:
            primary_table = find_primary_table(KeySignature.of(child), index)
            if primary_table is None or primary_table is child.table:
                continue

            primary_columns = primary_table.primary_columns
            if not primary_columns:
                continue
            parent = primary_columns[0]
            if parent.has_constraint_to(child):
                continue

            constraints.append(ImpliedForeignKeyConstraint(parent, child))

        logger.info(f"Found {len(constraints)} implied foreign key constraints")
        return constraints
