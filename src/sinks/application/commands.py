"""Application commands (use cases) for BOM compilation."""

from __future__ import annotations

import logging

from sinks.application.completeness import missing_fields
from sinks.application.dtos import BomResult, MissingField, OrderInput
from sinks.domain import (
    AccessorySelection,
    BomAssembler,
    BOMNode,
    Categorizer,
    Configuration,
    LookupTables,
    ResolutionWarning,
    RuleRepair,
    aggregate_tree,
    apply_rules,
    resolve_configuration,
)

logger = logging.getLogger(__name__)


class IncompleteConfigurationError(Exception):
    """Raised at the caller boundary when mandatory facets are absent.

    Attributes:
        missing_fields: The absent facets, in configuration order.
    """

    def __init__(self, missing_fields: list[MissingField]) -> None:
        self.missing_fields = list(missing_fields)
        labels = ", ".join(field.label for field in self.missing_fields)
        super().__init__(f"Configuration incomplete, missing: {labels}")


class CompileBomCommand:
    """Compile one build configuration into a categorized BOM.

    Pipeline: snapshot -> rule engine -> resolver -> assembler -> aggregator
    -> categorizer. The caller's configuration is never modified.

    Example:
        command = CompileBomCommand(load_lookup_tables())
        result = command.execute(config, language="EN")
        for node in result.flattened:
            print(node.id, node.quantity)
    """

    def __init__(self, tables: LookupTables) -> None:
        self.tables = tables
        self.assembler = BomAssembler(tables)
        self.categorizer = Categorizer(tables)

    def execute(
        self,
        config: Configuration,
        language: str | None = None,
        strict: bool = False,
    ) -> BomResult:
        """Execute the compilation.

        Args:
            config: Build configuration; snapshotted before use.
            language: Manual language; no manual kit is emitted when None.
            strict: Raise instead of returning a partial BOM when mandatory
                facets are missing.

        Returns:
            BomResult with both views, warnings, repairs and missing fields.

        Raises:
            IncompleteConfigurationError: If ``strict`` and the configuration
                is incomplete.
        """
        missing = missing_fields(config, self.tables)
        if missing and strict:
            raise IncompleteConfigurationError(missing)

        outcome = apply_rules(config.snapshot(), self.tables)
        resolved = resolve_configuration(outcome.configuration, self.tables)
        nodes = self.assembler.assemble(resolved, language=language)
        hierarchical, flattened = aggregate_tree(nodes)

        result = BomResult(
            hierarchical=self.categorizer.categorize_tree(hierarchical),
            flattened=self.categorizer.categorize_tree(flattened),
            missing_fields=missing,
            warnings=list(resolved.warnings),
            repairs=list(outcome.repairs),
            configuration=outcome.configuration,
        )
        logger.debug(
            f"Compiled BOM: {result.top_level_items} top-level, {result.total_items} flattened, "
            f"{len(result.missing_fields)} missing fields"
        )
        return result


class CompileOrderCommand:
    """Compile every build of an order into one combined BOM.

    The system manual kit is emitted once for the whole order, followed by
    each build in order and then each build's order-level accessories.
    Provenance tags are prefixed with the build number (``B-001:BASIN_SIZE``).
    """

    def __init__(self, tables: LookupTables) -> None:
        self.tables = tables
        self.assembler = BomAssembler(tables)
        self.categorizer = Categorizer(tables)

    def execute(self, order: OrderInput, strict: bool = False) -> BomResult:
        """Execute the order compilation.

        Raises:
            ValueError: If the order input itself is invalid.
            IncompleteConfigurationError: If ``strict`` and any build is
                missing or incomplete.
        """
        errors = order.validate()
        if errors:
            raise ValueError("; ".join(errors))

        nodes: list[BOMNode] = [self.assembler.manual_node(order.language)]
        missing: list[MissingField] = []
        warnings: list[ResolutionWarning] = []
        repairs: list[RuleRepair] = []

        for build_number in order.build_numbers:
            config = order.configurations.get(build_number)
            if config is None:
                logger.warning(f"No configuration for build {build_number}")
                missing.append(
                    MissingField(f"configurations.{build_number}", f"Configuration for build {build_number}")
                )
                continue
            missing.extend(
                MissingField(f"configurations.{build_number}.{field.path}", f"Build {build_number}: {field.label}")
                for field in missing_fields(config, self.tables)
            )
            outcome = apply_rules(config.snapshot(), self.tables)
            resolved = resolve_configuration(outcome.configuration, self.tables)
            nodes.extend(self.assembler.assemble(resolved, source_prefix=build_number))
            warnings.extend(resolved.warnings)
            repairs.extend(outcome.repairs)

        for build_number in order.build_numbers:
            nodes.extend(self._accessory_nodes(build_number, order.accessories.get(build_number, [])))

        if missing and strict:
            raise IncompleteConfigurationError(missing)

        hierarchical, flattened = aggregate_tree(nodes)
        result = BomResult(
            hierarchical=self.categorizer.categorize_tree(hierarchical),
            flattened=self.categorizer.categorize_tree(flattened),
            missing_fields=missing,
            warnings=warnings,
            repairs=repairs,
        )
        logger.info(
            f"Compiled order of {len(order.build_numbers)} builds: {result.total_items} distinct items"
        )
        return result

    def _accessory_nodes(self, build_number: str, accessories: list[AccessorySelection]) -> list[BOMNode]:
        source = f"{build_number}:ACCESSORY"
        return [
            self.assembler.expand(accessory.id, accessory.quantity, source)
            for accessory in accessories
            if accessory.id and accessory.quantity > 0
        ]
