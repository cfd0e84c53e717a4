"""Name and type heuristics for matching orphan columns to primary keys."""

import re
from typing import Optional

from .schema import KeySignature


def name_matches(orphan_name: Optional[str], primary_key_name: Optional[str],
                 primary_key_table: Optional[str]) -> bool:
    """Check whether an orphan column name plausibly references a primary key.

    Matches, case-insensitively, any of:
        ``<pk>``, ``*_<pk>`` and ``<pk table>*<pk>``

    Args:
        orphan_name: Name of the orphan column
        primary_key_name: Name of the primary key column
        primary_key_table: Name of the table owning the primary key

    Returns:
        True if any pattern matches
    """
    if not orphan_name or not primary_key_name or not primary_key_table:
        return False

    if orphan_name.lower() == primary_key_name.lower():
        return True

    pk = re.escape(primary_key_name)
    if re.fullmatch(r'.*_' + pk, orphan_name, re.IGNORECASE):
        return True

    return re.fullmatch(re.escape(primary_key_table) + r'.*' + pk,
                        orphan_name, re.IGNORECASE) is not None


def type_matches(orphan: Optional[KeySignature], primary_key: Optional[KeySignature]) -> bool:
    """Check whether an orphan column's type and length fit a primary key.

    Either the type code or the (case-insensitive) type name must agree, and
    the lengths must be equal.
    """
    if orphan is None or primary_key is None:
        return False

    type_match_by_code = (orphan.type_code is not None and primary_key.type_code is not None
                          and orphan.type_code == primary_key.type_code)
    type_match_by_name = (orphan.type_name is not None and primary_key.type_name is not None
                          and orphan.type_name.lower() == primary_key.type_name.lower())

    return (type_match_by_code or type_match_by_name) and orphan.length == primary_key.length
