"""Linked table/column model the implied key finder works on."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class ColumnRef:
    """Reference to a column by table and column name."""
    table: str
    column: str

    def __str__(self) -> str:
        return f"{self.table}.{self.column}"


@dataclass(eq=False)
class TableColumn:
    """A column of a table.

    Columns compare by identity; ``table`` is a back-reference set when the
    column is added to its table.
    """
    name: str
    type_code: Optional[int] = None
    type_name: Optional[str] = None
    length: int = 0
    is_primary_key: bool = False
    is_foreign_key: bool = False
    nullable: bool = True
    allows_implied_parents: bool = True
    allows_implied_children: bool = True
    parents: List[ColumnRef] = field(default_factory=list)
    children: List[ColumnRef] = field(default_factory=list)
    table: Optional["Table"] = field(default=None, repr=False)

    @property
    def ref(self) -> ColumnRef:
        table_name = self.table.name if self.table is not None else ""
        return ColumnRef(table_name, self.name)

    def has_constraint_to(self, other: "TableColumn") -> bool:
        """Check whether a declared relationship links this column and ``other``.

        Args:
            other: Candidate column

        Returns:
            True if ``other`` is a declared parent or child of this column
        """
        if other is None:
            return False
        other_ref = other.ref
        return other_ref in self.parents or other_ref in self.children

    def disable_implied_keys(self) -> None:
        self.allows_implied_parents = False
        self.allows_implied_children = False


@dataclass(eq=False)
class Table:
    """A table and its ordered columns."""
    name: str
    schema_name: Optional[str] = None
    columns: List[TableColumn] = field(default_factory=list)
    primary_key: List[str] = field(default_factory=list)

    def __post_init__(self):
        for column in self.columns:
            column.table = self
        for name in self.primary_key:
            column = self.get_column(name)
            if column is not None:
                column.is_primary_key = True

    def add_column(self, column: TableColumn) -> TableColumn:
        column.table = self
        self.columns.append(column)
        return column

    def get_column(self, name: str) -> Optional[TableColumn]:
        for column in self.columns:
            if column.name == name:
                return column
        return None

    @property
    def primary_columns(self) -> List[TableColumn]:
        """Primary key columns in key order.

        Uses ``primary_key`` when given, otherwise the flagged columns in
        column order.
        """
        if self.primary_key:
            ordered = [self.get_column(name) for name in self.primary_key]
            return [column for column in ordered if column is not None]
        return [column for column in self.columns if column.is_primary_key]

    @property
    def sort_key(self) -> Tuple[str, str, str]:
        name = self.name or ""
        return (name.lower(), name, self.schema_name or "")

    def __lt__(self, other: "Table") -> bool:
        return self.sort_key < other.sort_key

    def __repr__(self) -> str:
        return f"Table(name={self.name!r}, columns={len(self.columns)})"


@dataclass(frozen=True)
class KeySignature:
    """Name, type and length of a column, used to index primary keys."""
    name: Optional[str]
    type_code: Optional[int]
    type_name: Optional[str]
    length: int

    @classmethod
    def of(cls, column: TableColumn) -> "KeySignature":
        return cls(column.name, column.type_code, column.type_name, column.length)

    @property
    def sort_key(self) -> Tuple:
        return (
            self.name or "",
            self.type_code if self.type_code is not None else -1,
            self.type_name or "",
            self.length,
        )

    def __lt__(self, other: "KeySignature") -> bool:
        return self.sort_key < other.sort_key


@dataclass(frozen=True)
class ImpliedForeignKeyConstraint:
    """A parent/child column pair inferred rather than declared."""
    parent: TableColumn
    child: TableColumn

    @property
    def parent_table(self) -> Optional[Table]:
        return self.parent.table

    @property
    def child_table(self) -> Optional[Table]:
        return self.child.table

    def __str__(self) -> str:
        return f"{self.child.ref} -> {self.parent.ref}"
