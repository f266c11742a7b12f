"""Tests for BOM tree expansion."""

from __future__ import annotations

from sinks.domain import (
    AccessorySelection,
    BasinConfig,
    BomAssembler,
    CatalogComponent,
    CatalogItem,
    Configuration,
    FaucetConfig,
    LookupTables,
    PegboardConfig,
    apply_rules,
    resolve_configuration,
)


def _assemble(config: Configuration, tables: LookupTables, **kwargs):
    outcome = apply_rules(config, tables)
    resolved = resolve_configuration(outcome.configuration, tables)
    return BomAssembler(tables).assemble(resolved, **kwargs)


class TestEmissionOrder:
    """Tests for section ordering of top-level nodes."""

    def test_e_sink_build_order(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        nodes = _assemble(e_sink_config, tables, language="EN")
        assert [node.id for node in nodes] == [
            "T2-STD-MANUAL-EN-KIT",
            "T2-BODY-48-60-HA",
            "T2-DL27-KIT",
            "T2-LEVELING-CASTOR-475",
            "T2-BSN-ESK-KIT",
            "T2-ADW-BASIN24X20X10",
            "T2-CTRL-ESK1",
        ]

    def test_no_manual_without_language(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        nodes = _assemble(e_sink_config, tables)
        assert nodes[0].id == "T2-BODY-48-60-HA"

    def test_faucets_precede_control_box(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        e_sink_config.faucets = [FaucetConfig("WRIST_BLADE", "BASIN_1")]
        ids = [node.id for node in _assemble(e_sink_config, tables)]
        assert ids.index("T2-OA-STD-FAUCET-WB-KIT") < ids.index("T2-CTRL-ESK1")

    def test_output_is_deterministic(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        assert _assemble(e_sink_config, tables, language="EN") == _assemble(e_sink_config, tables, language="EN")

    def test_empty_configuration_yields_only_manual(self, tables: LookupTables) -> None:
        nodes = _assemble(Configuration(), tables, language="EN")
        assert [node.id for node in nodes] == ["T2-STD-MANUAL-EN-KIT"]


class TestExpansion:
    """Tests for recursive expansion."""

    def test_child_quantities_multiply(self, tables: LookupTables) -> None:
        node = BomAssembler(tables).expand("T2-DL27-KIT", 2, "LEGS")
        assert node.quantity == 2
        assert node.children[0].id == "T2-DL27-COLUMN"
        assert node.children[0].quantity == 8
        assert node.children[0].source_contexts == ("LEGS",)

    def test_unknown_id_becomes_placeholder(self, tables: LookupTables) -> None:
        node = BomAssembler(tables).expand("T2-NOPE", 1, "ACCESSORY")
        assert node.is_placeholder
        assert node.name == "Unknown Assembly: T2-NOPE"
        assert node.children == ()

    def test_catalog_metadata_is_carried(self, tables: LookupTables) -> None:
        node = BomAssembler(tables).expand("T2-BSN-ESK-KIT", 1, "BASIN_TYPE_KIT")
        assert node.part_number == "713.107"
        assert node.children[0].id == "T2-DRAIN-ASSY"

    def test_circular_reference_terminates(self) -> None:
        tables = LookupTables(
            items={
                "A": CatalogItem("A", "Assembly A", components=(CatalogComponent("B", 1),)),
                "B": CatalogItem("B", "Assembly B", components=(CatalogComponent("A", 2),)),
            }
        )
        node = BomAssembler(tables).expand("A", 1, "ACCESSORY")
        inner = node.children[0].children[0]
        assert inner.id == "A"
        assert inner.quantity == 2
        assert inner.children == ()


class TestPegboard:
    def test_pegboard_emits_light_kit_then_composed_kit(
        self, tables: LookupTables, e_sink_config: Configuration
    ) -> None:
        e_sink_config.pegboard = PegboardConfig(enabled=True, type_id="PERFORATED", color_id="T-OA-PB-COLOR-BLUE")
        nodes = _assemble(e_sink_config, tables)
        ids = [node.id for node in nodes]
        light = ids.index("T2-OHL-MDRD-KIT")
        kit = nodes[light + 1]
        assert kit.id == "T2-ADW-PB-6036-BLUE-PERF-KIT"
        assert kit.name == "Perforated Pegboard Kit 6036 Blue"
        assert [child.id for child in kit.children] == ["T2-ADW-PB-6036", "T-OA-PB-COLOR"]
        assert kit.source_contexts == ("PEGBOARD_KIT",)

    def test_solid_pegboard_without_color(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        e_sink_config.pegboard = PegboardConfig(enabled=True, type_id="SOLID")
        kit = next(n for n in _assemble(e_sink_config, tables) if n.id.startswith("T2-ADW-PB-"))
        assert kit.id == "T2-ADW-PB-6036-SOLID-KIT"
        assert [child.id for child in kit.children] == ["T2-ADW-PB-6036"]

    def test_expand_composes_pegboard_kit_ids(self, tables: LookupTables) -> None:
        node = BomAssembler(tables).expand("T2-ADW-PB-6036-BLUE-PERF-KIT", 2, "ACCESSORY")
        assert node.name == "Perforated Pegboard Kit 6036 Blue"
        assert not node.is_placeholder
        assert [(child.id, child.quantity) for child in node.children] == [
            ("T2-ADW-PB-6036", 2),
            ("T-OA-PB-COLOR", 2),
        ]


class TestBasins:
    def test_custom_basin_node(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        e_sink_config.basins = [
            BasinConfig(type_id="E_SINK", size_id="CUSTOM", custom_width=32, custom_length=22, custom_depth=10)
        ]
        node = next(n for n in _assemble(e_sink_config, tables) if n.is_custom)
        assert node.id == "T2-ADW-BASIN-32X22X10"
        assert node.part_number == "720.215.001"
        assert node.source_contexts == ("BASIN_SIZE",)

    def test_di_basin_gets_auto_faucet(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        e_sink_config.basins = [BasinConfig(type_id="E_SINK_DI", size_id="24X20X10")]
        nodes = _assemble(e_sink_config, tables)
        faucet = next(n for n in nodes if n.id == "T2-OA-DI-GOOSENECK-FAUCET-KIT")
        assert faucet.source_contexts == ("FAUCET_AUTO",)

    def test_basin_addons_follow_size(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        e_sink_config.basins[0].addon_ids = ["T2-OA-BASIN-LIGHT-ESK-KIT"]
        ids = [node.id for node in _assemble(e_sink_config, tables)]
        assert ids.index("T2-OA-BASIN-LIGHT-ESK-KIT") == ids.index("T2-ADW-BASIN24X20X10") + 1


class TestManualAndProvenance:
    def test_unknown_language_defaults_to_english(self, tables: LookupTables) -> None:
        assert BomAssembler(tables).manual_node("DE").id == "T2-STD-MANUAL-EN-KIT"

    def test_language_is_case_insensitive(self, tables: LookupTables) -> None:
        assert BomAssembler(tables).manual_node("fr").id == "T2-STD-MANUAL-FR-KIT"

    def test_source_prefix(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        nodes = _assemble(e_sink_config, tables, source_prefix="B-001")
        assert nodes[0].source_contexts == ("B-001:SINK_BODY",)
        assert nodes[1].children[0].source_contexts == ("B-001:LEGS",)

    def test_accessories_last_with_quantity(self, tables: LookupTables, e_sink_config: Configuration) -> None:
        e_sink_config.accessories = [AccessorySelection("T-OA-SSSHELF-1812", 2)]
        nodes = _assemble(e_sink_config, tables)
        assert nodes[-1].id == "T-OA-SSSHELF-1812"
        assert nodes[-1].quantity == 2
        assert nodes[-1].source_contexts == ("ACCESSORY",)
