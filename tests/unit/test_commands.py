"""End-to-end tests for the compile commands against the bundled catalog."""

from __future__ import annotations

import pytest

from sinks.application import (
    CompileBomCommand,
    CompileOrderCommand,
    IncompleteConfigurationError,
    OrderInput,
    missing_fields,
)
from sinks.domain import (
    AccessorySelection,
    BasinConfig,
    Category,
    Configuration,
    FaucetConfig,
    LookupTables,
    PegboardConfig,
)


@pytest.fixture
def command(catalog_tables: LookupTables) -> CompileBomCommand:
    return CompileBomCommand(catalog_tables)


class TestMissingFields:
    def test_complete_configuration(self, catalog_tables: LookupTables, e_sink_config: Configuration) -> None:
        assert missing_fields(e_sink_config, catalog_tables) == []

    def test_empty_configuration(self, catalog_tables: LookupTables) -> None:
        paths = [field.path for field in missing_fields(Configuration(), catalog_tables)]
        assert paths == ["sinkModelId", "width/length"]

    def test_basin_count_and_types(self, catalog_tables: LookupTables) -> None:
        config = Configuration(
            sink_model_id="T2-B3",
            width=30,
            length=96,
            basins=[BasinConfig(type_id="E_SINK"), BasinConfig()],
        )
        labels = [field.label for field in missing_fields(config, catalog_tables)]
        assert labels == ["Basin count (2 of 3 configured)", "Basin 2 type"]

    def test_legs_and_feet_are_optional(self, catalog_tables: LookupTables, e_sink_config: Configuration) -> None:
        e_sink_config.legs_type_id = None
        e_sink_config.feet_type_id = None
        assert missing_fields(e_sink_config, catalog_tables) == []


class TestCompileBomCommand:
    """Tests for single-build compilation."""

    def test_e_sink_build(self, command: CompileBomCommand, e_sink_config: Configuration) -> None:
        result = command.execute(e_sink_config, language="EN")

        assert result.is_complete
        assert [node.id for node in result.hierarchical] == [
            "T2-STD-MANUAL-EN-KIT",
            "T2-BODY-48-60-HA",
            "T2-DL27-KIT",
            "T2-LEVELING-CASTOR-475",
            "T2-BSN-ESK-KIT",
            "T2-ADW-BASIN24X20X10",
            "T2-CTRL-ESK1",
        ]
        categories = {node.id: node.category.label for node in result.flattened}
        assert categories["T2-STD-MANUAL-EN-KIT"] == "SYSTEM"
        assert categories["T2-DL27-KIT"] == "SINK_BODY"
        assert categories["T2-LEVELING-CASTOR-475"] == "SINK_BODY"
        assert categories["T2-BSN-ESK-KIT"] == "BASIN"
        assert categories["T2-ADW-BASIN24X20X10"] == "BASIN"
        assert categories["T2-CTRL-ESK1"] == "CONTROL_BOX"

    def test_flattened_quantities_are_absolute(self, command: CompileBomCommand, e_sink_config: Configuration) -> None:
        result = command.execute(e_sink_config)
        columns = next(node for node in result.flattened if node.id == "T2-DL27-COLUMN")
        assert columns.quantity == 4
        assert all(not node.has_children for node in result.flattened)

    def test_flattened_ids_are_unique(self, command: CompileBomCommand, e_sink_config: Configuration) -> None:
        e_sink_config.pegboard = PegboardConfig(enabled=True, type_id="PERFORATED", color_id="BLUE")
        e_sink_config.accessories = [AccessorySelection("T-OA-PB-COLOR", 1)]
        result = command.execute(e_sink_config)
        keys = [node.merge_key for node in result.flattened]
        assert len(keys) == len(set(keys))
        color = next(node for node in result.flattened if node.id == "T-OA-PB-COLOR")
        assert color.quantity == 2
        assert color.source_count == 2

    def test_pegboard_kit_selected_twice_merges(self, command: CompileBomCommand, e_sink_config: Configuration) -> None:
        e_sink_config.pegboard = PegboardConfig(enabled=True, type_id="PERFORATED", color_id="BLUE")
        e_sink_config.accessories = [AccessorySelection("T2-ADW-PB-6036-BLUE-PERF-KIT", 1)]
        result = command.execute(e_sink_config)
        kits = [node for node in result.flattened if node.id == "T2-ADW-PB-6036-BLUE-PERF-KIT"]
        assert len(kits) == 1
        assert kits[0].name == "Perforated Pegboard Kit 6036 Blue"
        assert kits[0].quantity == 2
        assert not kits[0].is_placeholder
        assert len({node.id for node in result.flattened}) == len(result.flattened)

    def test_di_build_without_faucets_gets_one_gooseneck(self, command: CompileBomCommand) -> None:
        config = Configuration(sink_model_id="T2-B1", width=30, length=60, basins=[BasinConfig(type_id="E_SINK_DI")])
        result = command.execute(config)
        goosenecks = [node for node in result.flattened if node.id == "T2-OA-DI-GOOSENECK-FAUCET-KIT"]
        assert len(goosenecks) == 1
        assert goosenecks[0].quantity == 1

        again = command.execute(result.configuration)
        assert [node.quantity for node in again.flattened if node.id == "T2-OA-DI-GOOSENECK-FAUCET-KIT"] == [1]
        assert not again.repairs

    def test_user_gooseneck_survives_faucet_ceiling(self, command: CompileBomCommand) -> None:
        config = Configuration(
            sink_model_id="T2-B1",
            width=30,
            length=60,
            basins=[BasinConfig(type_id="E_SINK_DI")],
            faucets=[
                FaucetConfig("T2-OA-STD-FAUCET-WB-KIT"),
                FaucetConfig("T2-OA-PRE-RINSE-FAUCET-KIT"),
                FaucetConfig("T2-OA-DI-GOOSENECK-FAUCET-KIT"),
            ],
        )
        result = command.execute(config)
        ids = {node.id for node in result.flattened}
        assert "T2-OA-DI-GOOSENECK-FAUCET-KIT" in ids
        assert "T2-OA-PRE-RINSE-FAUCET-KIT" not in ids
        assert not command.execute(result.configuration).repairs

    def test_accessory_categories(self, command: CompileBomCommand, e_sink_config: Configuration) -> None:
        e_sink_config.accessories = [
            AccessorySelection("T-OA-SSSHELF-1812", 2),
            AccessorySelection("T-OA-PB-SS-1GLOVE", 1),
        ]
        result = command.execute(e_sink_config)
        labels = {node.id: node.category.label for node in result.items_in(Category.ACCESSORY)}
        assert labels == {
            "T-OA-SSSHELF-1812": "ACCESSORY/STORAGE",
            "T-OA-PB-SS-1GLOVE": "ACCESSORY/DISPENSERS",
        }

    def test_caller_configuration_untouched(self, command: CompileBomCommand) -> None:
        config = Configuration(sink_model_id="T2-B1", width=30, length=60, basins=[BasinConfig(type_id="E_SINK_DI")])
        result = command.execute(config)
        assert config.faucets == []
        assert result.configuration.faucets[0].type_id == "T2-OA-DI-GOOSENECK-FAUCET-KIT"
        assert result.repairs

    def test_partial_bom(self, command: CompileBomCommand) -> None:
        result = command.execute(Configuration(sink_model_id="T2-B2", basins=[BasinConfig(type_id="E_SINK")]))
        assert not result.is_complete
        assert "basins" in [field.path for field in result.missing_fields]
        assert any(node.id == "T2-BSN-ESK-KIT" for node in result.hierarchical)
        assert not any(node.id.startswith("T2-CTRL-") for node in result.hierarchical)

    def test_strict_raises(self, command: CompileBomCommand) -> None:
        with pytest.raises(IncompleteConfigurationError, match="Sink model") as exc_info:
            command.execute(Configuration(), strict=True)
        assert len(exc_info.value.missing_fields) == 2

    def test_unknown_selection_warns(self, command: CompileBomCommand, e_sink_config: Configuration) -> None:
        e_sink_config.faucets = [FaucetConfig("T2-OA-NOPE-FAUCET", "BASIN_1")]
        result = command.execute(e_sink_config)
        assert result.warnings[0].field == "faucets[0].faucetTypeId"
        placeholder = next(node for node in result.flattened if node.id == "T2-OA-NOPE-FAUCET")
        assert placeholder.is_placeholder

    def test_to_dict(self, command: CompileBomCommand, e_sink_config: Configuration) -> None:
        data = command.execute(e_sink_config).to_dict()
        assert data["topLevelItems"] == 6
        assert data["missingFields"] == []
        assert data["hierarchical"][0]["category"] == "SINK_BODY"


class TestCompileOrderCommand:
    """Tests for multi-build orders."""

    @pytest.fixture
    def order(self, e_sink_config: Configuration) -> OrderInput:
        second = e_sink_config.snapshot()
        second.length = 72
        return OrderInput(
            build_numbers=["B-001", "B-002"],
            configurations={"B-001": e_sink_config, "B-002": second},
            accessories={"B-001": [AccessorySelection("T-OA-MNT-ARM", 1)]},
            language="FR",
        )

    def test_manual_emitted_once(self, catalog_tables: LookupTables, order: OrderInput) -> None:
        result = CompileOrderCommand(catalog_tables).execute(order)
        manuals = [node for node in result.hierarchical if "MANUAL" in node.id]
        assert [node.id for node in manuals] == ["T2-STD-MANUAL-FR-KIT"]
        assert result.hierarchical[0].id == "T2-STD-MANUAL-FR-KIT"

    def test_builds_aggregate_with_prefixed_provenance(self, catalog_tables: LookupTables, order: OrderInput) -> None:
        result = CompileOrderCommand(catalog_tables).execute(order)
        kit = next(node for node in result.flattened if node.id == "T2-BSN-ESK-KIT")
        assert kit.quantity == 2
        assert kit.source_contexts == ("B-001:BASIN_TYPE_KIT", "B-002:BASIN_TYPE_KIT")

    def test_accessories_follow_all_builds(self, catalog_tables: LookupTables, order: OrderInput) -> None:
        result = CompileOrderCommand(catalog_tables).execute(order)
        assert result.hierarchical[-1].id == "T-OA-MNT-ARM"
        assert result.hierarchical[-1].source_contexts == ("B-001:ACCESSORY",)
        assert result.configuration is None

    def test_missing_build_configuration(self, catalog_tables: LookupTables, e_sink_config: Configuration) -> None:
        order = OrderInput(build_numbers=["B-001", "B-002"], configurations={"B-001": e_sink_config})
        result = CompileOrderCommand(catalog_tables).execute(order)
        assert [field.path for field in result.missing_fields] == ["configurations.B-002"]

        with pytest.raises(IncompleteConfigurationError):
            CompileOrderCommand(catalog_tables).execute(order, strict=True)

    def test_incomplete_build_is_labelled(self, catalog_tables: LookupTables) -> None:
        order = OrderInput(build_numbers=["B-007"], configurations={"B-007": Configuration(sink_model_id="T2-B1")})
        result = CompileOrderCommand(catalog_tables).execute(order)
        assert result.missing_fields[0].path == "configurations.B-007.width/length"
        assert result.missing_fields[0].label.startswith("Build B-007: ")

    def test_invalid_order(self, catalog_tables: LookupTables) -> None:
        with pytest.raises(ValueError, match="unique"):
            CompileOrderCommand(catalog_tables).execute(OrderInput(build_numbers=["B-1", "B-1"]))
