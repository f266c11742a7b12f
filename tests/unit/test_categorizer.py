"""Tests for semantic categorization."""

from __future__ import annotations

import pytest

from sinks.domain import BOMNode, Categorizer, Classification, LookupTables


@pytest.fixture
def categorizer(tables: LookupTables) -> Categorizer:
    return Categorizer(tables)


class TestPartNumberRanges:
    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("711.97", "SINK_BODY"),
            ("709.82", "SINK_BODY"),
            ("713.107", "BASIN"),
            ("706.60", "FAUCET_SPRAYER"),
            ("702.10", "ACCESSORY/STORAGE"),
        ],
    )
    def test_range_lookup(self, categorizer: Categorizer, identifier: str, expected: str) -> None:
        assert categorizer.classify_identifier(identifier).label == expected

    def test_out_of_range_minor_code_falls_through(self, categorizer: Categorizer) -> None:
        assert categorizer.classify_identifier("711.20").label == "OTHER"

    def test_part_number_checked_before_id(self, categorizer: Categorizer) -> None:
        result = categorizer.classify_identifier("T2-BODY-48-60-HA", "Sink Body", "709.82")
        assert result.label == "SINK_BODY"


class TestKeywordRules:
    def test_manual_is_system(self, categorizer: Categorizer) -> None:
        assert categorizer.classify_identifier("T2-STD-MANUAL-EN-KIT", "Manual Kit (English)").label == "SYSTEM"

    def test_leg_column_is_sink_body(self, categorizer: Categorizer) -> None:
        assert categorizer.classify_identifier("T2-DL27-COLUMN", "DL27 Leg Column").label == "SINK_BODY"

    def test_lighting_within_accessory_scope(self, categorizer: Categorizer) -> None:
        result = categorizer.classify_identifier("T-OA-MLIGHT-PB-KIT", "Magnifying Light")
        assert result.label == "ACCESSORY/LIGHTING"

    def test_scope_catch_all(self, categorizer: Categorizer) -> None:
        assert categorizer.classify_identifier("T-OA-MNT-ARM", "Monitor Arm").label == "ACCESSORY/OTHER"

    def test_lighting_keyword_outside_scope_is_other(self, categorizer: Categorizer) -> None:
        assert categorizer.classify_identifier("XYZ-LAMP", "Desk Light").label == "OTHER"

    def test_unknown_is_other(self, categorizer: Categorizer) -> None:
        assert categorizer.classify_identifier("T2-NOPE").label == "OTHER"


class TestCategorizeTree:
    def test_explicit_category_wins(self, categorizer: Categorizer) -> None:
        node = BOMNode(
            "T-OA-GLOVE-DISP",
            "Glove Dispenser",
            part_number="702.33",
            category=Classification.parse("ACCESSORY/DISPENSERS"),
        )
        assert categorizer.classify(node).label == "ACCESSORY/DISPENSERS"

    def test_descendants_are_categorized(self, categorizer: Categorizer) -> None:
        tree = BOMNode(
            "T2-DL27-KIT",
            "DL27 Leg Kit",
            part_number="711.97",
            children=(BOMNode("T2-DL27-COLUMN", "DL27 Leg Column", 4),),
        )
        [result] = categorizer.categorize_tree([tree])
        assert result.category.label == "SINK_BODY"
        assert result.children[0].category.label == "SINK_BODY"
        assert tree.category is None

    def test_empty_tables_yield_other(self) -> None:
        assert Categorizer(LookupTables()).classify_identifier("711.97").label == "OTHER"
