"""Tests for name and type matching heuristics."""

import pytest

from implied_fk.matching import name_matches, type_matches
from implied_fk.schema import KeySignature


class TestNameMatches:
    """Test name_matches."""

    def test_exact_name_case_insensitive(self):
        """Test orphan named like the primary key."""
        assert name_matches("id", "ID", "Customer")
        assert name_matches("CustomerId", "customerid", "Account")

    def test_underscore_suffix(self):
        """Test ``*_<pk>`` pattern."""
        assert name_matches("customer_id", "id", "Customer")
        assert name_matches("BILLING_CUSTOMER_ID", "Id", "Account")
        assert not name_matches("customerid", "id", "Account")

    def test_table_prefix_and_key_suffix(self):
        """Test ``<table>*<pk>`` pattern."""
        assert name_matches("customerRefId", "Id", "Customer")
        assert name_matches("CustomerId", "Id", "Customer")
        assert not name_matches("RefCustomerId", "Id", "Customer")

    def test_no_partial_matches(self):
        """Test that the key name must end the orphan name."""
        assert not name_matches("customer_id_old", "id", "Customer")
        assert not name_matches("Identifier", "Id", "Customer")

    def test_names_are_literal(self):
        """Test that regex characters in names are not interpreted."""
        assert not name_matches("customerXid", "id", "customer.")
        assert name_matches("a.b_id", "id", "x")
        assert not name_matches("anything_id", ".*", "x")

    @pytest.mark.parametrize("orphan, pk, table", [
        (None, "Id", "Customer"),
        ("CustomerId", None, "Customer"),
        ("CustomerId", "Id", None),
        ("", "Id", "Customer"),
        ("CustomerId", "", "Customer"),
        ("CustomerId", "Id", ""),
    ])
    def test_missing_names_never_match(self, orphan, pk, table):
        """Test absent or empty names."""
        assert not name_matches(orphan, pk, table)


class TestTypeMatches:
    """Test type_matches."""

    def test_same_code_and_length(self):
        """Test matching type code."""
        assert type_matches(KeySignature("a", 4, None, 4), KeySignature("b", 4, "INTEGER", 4))

    def test_same_name_case_insensitive(self):
        """Test matching type name without codes."""
        assert type_matches(KeySignature("a", None, "varchar", 10), KeySignature("b", None, "VARCHAR", 10))

    def test_either_representation_is_enough(self):
        """Test codes differing while names agree."""
        assert type_matches(KeySignature("a", 4, "INT", 4), KeySignature("b", -5, "int", 4))

    def test_length_mismatch(self):
        """Test that length must be equal."""
        assert not type_matches(KeySignature("a", 12, "VARCHAR", 10), KeySignature("b", 12, "VARCHAR", 20))

    def test_different_types(self):
        """Test different type code and name."""
        assert not type_matches(KeySignature("a", 4, "INT", 4), KeySignature("b", 12, "VARCHAR", 4))

    def test_missing_type_information(self):
        """Test that absent types never match."""
        assert not type_matches(KeySignature("a", None, None, 4), KeySignature("b", None, None, 4))
        assert not type_matches(KeySignature("a", 4, None, 4), KeySignature("b", None, "INT", 4))

    def test_missing_signature(self):
        """Test None arguments."""
        signature = KeySignature("a", 4, "INT", 4)
        assert not type_matches(None, signature)
        assert not type_matches(signature, None)
