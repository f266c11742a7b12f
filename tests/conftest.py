"""Pytest configuration and shared fixtures for sink BOM tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sinks.application.catalog import load_lookup_tables
from sinks.domain import (
    BasinConfig,
    CatalogComponent,
    CatalogItem,
    CategoryRange,
    Classification,
    Configuration,
    CoverageRange,
    KeywordRule,
    LookupTables,
    SinkModel,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests exercising the CLI or REST API")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Lookup tables
# =============================================================================


@pytest.fixture(scope="session")
def catalog_tables() -> LookupTables:
    """The bundled lookup tables."""
    return load_lookup_tables()


@pytest.fixture
def tables() -> LookupTables:
    """Small hand-built tables for focused domain tests."""
    return LookupTables(
        items={
            "T2-BSN-ESK-KIT": CatalogItem(
                "T2-BSN-ESK-KIT",
                "E-Sink Basin Kit",
                "713.107",
                components=(CatalogComponent("T2-DRAIN-ASSY", 1),),
            ),
            "T2-BSN-ESK-DI-KIT": CatalogItem("T2-BSN-ESK-DI-KIT", "E-Sink Basin Kit, DI Water", "713.108"),
            "T2-BSN-EDR-KIT": CatalogItem("T2-BSN-EDR-KIT", "E-Drain Basin Kit", "713.109"),
            "T2-DRAIN-ASSY": CatalogItem("T2-DRAIN-ASSY", "Basin Drain Assembly"),
            "T2-ADW-BASIN24X20X10": CatalogItem("T2-ADW-BASIN24X20X10", "Basin 24\" x 20\" x 10\"", "712.104"),
            "T2-BODY-48-60-HA": CatalogItem("T2-BODY-48-60-HA", "Sink Body 48\"-60\"", "709.82"),
            "T2-DL27-KIT": CatalogItem(
                "T2-DL27-KIT",
                "DL27 Leg Kit",
                "711.97",
                components=(CatalogComponent("T2-DL27-COLUMN", 4),),
            ),
            "T2-DL27-COLUMN": CatalogItem("T2-DL27-COLUMN", "DL27 Leg Column"),
            "T2-OA-DI-GOOSENECK-FAUCET-KIT": CatalogItem(
                "T2-OA-DI-GOOSENECK-FAUCET-KIT", "GOOSENECK TREATED WATER FAUCET KIT, PVC", "706.60"
            ),
            "T2-OA-STD-FAUCET-WB-KIT": CatalogItem(
                "T2-OA-STD-FAUCET-WB-KIT", "10\" WRIST BLADE FAUCET KIT", "706.58"
            ),
            "T2-STD-MANUAL-EN-KIT": CatalogItem("T2-STD-MANUAL-EN-KIT", "Manual Kit (English)"),
            "T2-STD-MANUAL-FR-KIT": CatalogItem("T2-STD-MANUAL-FR-KIT", "Manual Kit (French)"),
        },
        sink_models={
            "T2-B1": SinkModel("T2-B1", "T2-B1 (Single Basin)", 1),
            "T2-B2": SinkModel("T2-B2", "T2-B2 (Dual Basin)", 2),
            "T2-B3": SinkModel("T2-B3", "T2-B3 (Triple Basin)", 3),
        },
        basin_types={
            "E_SINK": "T2-BSN-ESK-KIT",
            "E_SINK_DI": "T2-BSN-ESK-DI-KIT",
            "E_DRAIN": "T2-BSN-EDR-KIT",
        },
        basin_sizes={"24X20X10": "T2-ADW-BASIN24X20X10"},
        basin_size_aliases={
            "712.104": "T2-ADW-BASIN24X20X10",
            "ASSY-T2-ADW-BASIN24X20X10": "T2-ADW-BASIN24X20X10",
        },
        pegboard_coverage=(
            CoverageRange("3436", 34, 47),
            CoverageRange("4836", 48, 59),
            CoverageRange("6036", 60, 71),
            CoverageRange("7236", 72, 83),
            CoverageRange("12036", 120, 130),
        ),
        pegboard_colors=("BLUE", "GREEN"),
        sink_bodies=(
            CoverageRange("T2-BODY-48-60-HA", 48, 60),
            CoverageRange("T2-BODY-61-72-HA", 61, 72),
        ),
        control_boxes={
            "ESK1": "T2-CTRL-ESK1",
            "EDR1-ESK1": "T2-CTRL-EDR1-ESK1",
            "EDR2": "T2-CTRL-EDR2",
        },
        faucet_types={"WRIST_BLADE": "T2-OA-STD-FAUCET-WB-KIT", "GOOSENECK_DI": "T2-OA-DI-GOOSENECK-FAUCET-KIT"},
        manual_kits={"EN": "T2-STD-MANUAL-EN-KIT", "FR": "T2-STD-MANUAL-FR-KIT"},
        category_ranges=(
            CategoryRange(709, Classification.parse("SINK_BODY")),
            CategoryRange(711, Classification.parse("SINK_BODY"), 95, 101),
            CategoryRange(713, Classification.parse("BASIN"), 107, 109),
            CategoryRange(712, Classification.parse("BASIN"), 102, 106),
            CategoryRange(706, Classification.parse("FAUCET_SPRAYER"), 58, 64),
            CategoryRange(702, Classification.parse("ACCESSORY/STORAGE")),
        ),
        keyword_rules=(
            KeywordRule(Classification.parse("SYSTEM"), id_contains=("manual",), name_contains=("manual",)),
            KeywordRule(Classification.parse("SINK_BODY"), id_contains=("t2-dl27",), name_contains=("leg",)),
            KeywordRule(Classification.parse("BASIN"), id_contains=("t2-adw-basin", "t2-drain-")),
            KeywordRule(
                Classification.parse("ACCESSORY/LIGHTING"),
                name_contains=("light",),
                within=("t-oa-", "t2-oa-"),
            ),
            KeywordRule(Classification.parse("ACCESSORY/OTHER"), within=("t-oa-", "t2-oa-")),
        ),
    )


# =============================================================================
# Configurations
# =============================================================================


@pytest.fixture
def e_sink_config() -> Configuration:
    """Complete single-basin E_SINK build."""
    return Configuration(
        sink_model_id="T2-B1",
        width=30,
        length=60,
        legs_type_id="T2-DL27-KIT",
        feet_type_id="T2-LEVELING-CASTOR-475",
        basins=[BasinConfig(type_id="E_SINK", size_id="24X20X10")],
    )


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
