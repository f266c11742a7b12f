"""Tests for domain value objects."""

from __future__ import annotations

import pytest

from sinks.domain import BOMNode, Category, Classification, parse_part_number
from sinks.domain.value_objects import between_placement, center_placement, placement_label


class TestClassification:
    def test_parse_plain_category(self) -> None:
        assert Classification.parse("basin") == Classification(Category.BASIN)

    def test_parse_accessory_subkind(self) -> None:
        result = Classification.parse("ACCESSORY/LIGHTING")
        assert result.label == "ACCESSORY/LIGHTING"

    def test_bare_accessory_maps_to_other(self) -> None:
        assert Classification.parse("ACCESSORY").label == "ACCESSORY/OTHER"

    def test_subkind_on_non_accessory_rejected(self) -> None:
        with pytest.raises(ValueError, match="no sub-kinds"):
            Classification.parse("BASIN/STORAGE")

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValueError):
            Classification.parse("PLUMBING")

    def test_parse_passes_instances_through(self) -> None:
        value = Classification(Category.SYSTEM)
        assert Classification.parse(value) is value


class TestBOMNode:
    def test_quantity_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            BOMNode("X", "X", quantity=0)

    def test_merge_key(self) -> None:
        assert BOMNode("A", "Name").merge_key == ("A", "Name")

    def test_to_dict_is_camel_case(self) -> None:
        node = BOMNode(
            "T2-BSN-ESK-KIT",
            "E-Sink Basin Kit",
            part_number="713.107",
            category=Classification.parse("BASIN"),
            source_contexts=("BASIN_TYPE_KIT",),
        )
        data = node.to_dict()
        assert data["partNumber"] == "713.107"
        assert data["category"] == "BASIN"
        assert data["sourceContexts"] == ["BASIN_TYPE_KIT"]
        assert data["children"] == []


class TestPlacements:
    def test_tags(self) -> None:
        assert center_placement(2) == "BASIN_2"
        assert between_placement(1) == "BETWEEN_1_2"

    @pytest.mark.parametrize(
        "tag,label",
        [
            ("BASIN_2", "Center of Basin 2"),
            ("BETWEEN_2_3", "Between Basin 2 & 3"),
            (None, "Unplaced"),
            ("LEFT", "LEFT"),
        ],
    )
    def test_labels(self, tag, label) -> None:
        assert placement_label(tag) == label


class TestPartNumbers:
    @pytest.mark.parametrize(
        "value,expected",
        [("711.97", (711, 97)), ("720.215.001", (720, 215)), (" 702.10 ", (702, 10)), ("T2-B1", None), (None, None)],
    )
    def test_parse(self, value, expected) -> None:
        assert parse_part_number(value) == expected
