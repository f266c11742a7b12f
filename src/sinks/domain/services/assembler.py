"""Expansion of a resolved configuration into a hierarchical BOM.

Emission order follows configuration-section order so the output is stable
for diffing:

    system manual -> sink body -> legs -> feet -> pegboard -> drawers
    -> basins (type kit, size, add-ons) -> faucets -> sprayers
    -> control box -> accessories

Catalog assemblies are expanded recursively. Child quantities are multiplied
by their parent's quantity, and every node carries the provenance tag of the
configuration facet that produced it.
"""

from __future__ import annotations

import logging

from ..catalog import LookupTables
from ..value_objects import BOMNode
from .resolver import (
    PEGBOARD_PREFIX,
    ResolvedBasinSize,
    ResolvedConfiguration,
    ResolvedPegboard,
    parse_pegboard_kit,
)

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "EN"


class BomAssembler:
    """Builds BOM trees from resolved configurations.

    The assembler holds only the lookup tables; ``assemble`` is pure and safe
    to call for many configurations.

    Example:
        assembler = BomAssembler(tables)
        nodes = assembler.assemble(resolved, language="EN")
    """

    def __init__(self, tables: LookupTables) -> None:
        self.tables = tables

    def assemble(
        self,
        resolved: ResolvedConfiguration,
        language: str | None = None,
        source_prefix: str | None = None,
    ) -> tuple[BOMNode, ...]:
        """Expand ``resolved`` into top-level BOM nodes.

        Args:
            resolved: Rule-validated, resolved configuration.
            language: Manual language; the system manual kit is only emitted
                when a language is given.
            source_prefix: Prepended to every provenance tag, e.g. a build
                number when several builds share one BOM.

        Returns:
            Top-level nodes in emission order.
        """
        prefix = f"{source_prefix}:" if source_prefix else ""

        def tag(facet: str) -> str:
            return f"{prefix}{facet}"

        nodes: list[BOMNode] = []

        if language:
            nodes.append(self.manual_node(language, tag("SYSTEM")))
        if resolved.sink_body_id:
            nodes.append(self.expand(resolved.sink_body_id, 1, tag("SINK_BODY")))
        if resolved.legs_id:
            nodes.append(self.expand(resolved.legs_id, 1, tag("LEGS")))
        if resolved.feet_id:
            nodes.append(self.expand(resolved.feet_id, 1, tag("FEET")))
        if resolved.pegboard is not None:
            nodes.append(self.expand(self.tables.overhead_light_kit_id, 1, tag("PEGBOARD_MANDATORY")))
            nodes.append(self._pegboard_node(resolved.pegboard, tag("PEGBOARD_KIT")))
        for drawer_id in resolved.drawer_ids:
            nodes.append(self.expand(drawer_id, 1, tag("DRAWER_COMPARTMENT")))

        for basin in resolved.basins:
            if basin.type_id:
                nodes.append(self.expand(basin.type_id, 1, tag("BASIN_TYPE_KIT")))
            if basin.size is not None:
                nodes.append(self._basin_size_node(basin.size, tag("BASIN_SIZE")))
            for addon_id in basin.addon_ids:
                nodes.append(self.expand(addon_id, 1, tag("BASIN_ADDON")))

        for faucet in resolved.faucets:
            source = tag("FAUCET_AUTO" if faucet.mandatory else "FAUCET_KIT")
            nodes.append(self.expand(faucet.type_id, faucet.quantity, source))
        for sprayer_id in resolved.sprayer_ids:
            nodes.append(self.expand(sprayer_id, 1, tag("SPRAYER_KIT")))

        if resolved.control_box_id:
            nodes.append(self.expand(resolved.control_box_id, 1, tag("CONTROL_BOX")))

        for accessory_id, quantity in resolved.accessories:
            nodes.append(self.expand(accessory_id, quantity, tag("ACCESSORY")))

        logger.debug(f"Assembled {len(nodes)} top-level BOM nodes")
        return tuple(nodes)

    def manual_node(self, language: str, source: str = "SYSTEM") -> BOMNode:
        """System manual kit for ``language``, defaulting to English."""
        code = language.strip().upper()
        kit_id = self.tables.manual_kits.get(code)
        if kit_id is None:
            logger.warning(f"No manual kit for language '{language}', using {DEFAULT_LANGUAGE}")
            kit_id = self.tables.manual_kits.get(DEFAULT_LANGUAGE, f"T2-STD-MANUAL-{DEFAULT_LANGUAGE}-KIT")
        return self.expand(kit_id, 1, source)

    def expand(
        self,
        item_id: str,
        quantity: int,
        source: str,
        _path: tuple[str, ...] = (),
    ) -> BOMNode:
        """Expand one catalog id, recursing into its components.

        Pegboard kit ids missing from the catalog are composed from their
        size and color kits, so a kit gets the same node whichever facet
        selects it. Other unknown ids become placeholder nodes. A component
        that refers back to one of its ancestors is emitted without children.

        Args:
            item_id: Catalog identifier to expand.
            quantity: Quantity of this node; component quantities are
                multiplied by it.
            source: Provenance tag recorded on the node and its descendants.

        Returns:
            The expanded node.
        """
        item = self.tables.item(item_id)
        if item is None:
            pegboard = parse_pegboard_kit(item_id)
            if pegboard is not None:
                return self._composed_pegboard(pegboard, quantity, source)
            logger.warning(f"Assembly {item_id} not found in catalog, adding placeholder")
            return BOMNode(
                id=item_id,
                name=f"Unknown Assembly: {item_id}",
                quantity=quantity,
                source_contexts=(source,),
                is_placeholder=True,
            )

        children: tuple[BOMNode, ...] = ()
        if item_id in _path:
            logger.warning(f"Circular component reference at {' > '.join(_path + (item_id,))}")
        else:
            children = tuple(
                self.expand(component.id, component.quantity * quantity, source, _path + (item_id,))
                for component in item.components
            )
        return BOMNode(
            id=item.id,
            name=item.name,
            quantity=quantity,
            category=item.category,
            children=children,
            source_contexts=(source,),
            part_number=item.part_number,
        )

    def _basin_size_node(self, size: ResolvedBasinSize, source: str) -> BOMNode:
        if not size.is_custom:
            return self.expand(size.id, 1, source)
        return BOMNode(
            id=size.id,
            name=size.name or size.id,
            quantity=1,
            source_contexts=(source,),
            part_number=size.part_number,
            is_custom=True,
        )

    def _pegboard_node(self, pegboard: ResolvedPegboard, source: str) -> BOMNode:
        if self.tables.has_item(pegboard.kit_id) or pegboard.size_id is None:
            return self.expand(pegboard.kit_id, 1, source)
        return self._composed_pegboard(pegboard, 1, source)

    def _composed_pegboard(self, pegboard: ResolvedPegboard, quantity: int, source: str) -> BOMNode:
        """Pegboard kit built from the size assembly plus, when colored, the color kit."""
        children = [self.expand(pegboard.size_id, quantity, source)]
        if pegboard.color_code:
            children.append(self.expand(self.tables.pegboard_color_kit_id, quantity, source))
        kind = "Perforated" if pegboard.type_code == "PERF" else "Solid"
        name = f"{kind} Pegboard Kit {pegboard.size_id[len(PEGBOARD_PREFIX):]}"
        if pegboard.color_code:
            name = f"{name} {pegboard.color_code.title()}"
        return BOMNode(
            id=pegboard.kit_id,
            name=name,
            quantity=quantity,
            children=tuple(children),
            source_contexts=(source,),
        )
