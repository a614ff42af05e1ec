"""
Hierarchy Building Component.

Responsible for converting flat catalog rows into the navigable
category / subcategory / class / product forest.
"""
import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from core.constants import MISSING_KEY_PART, NODE_ID_SEPARATOR, UNCATEGORIZED_LABEL
from core.models import FlatRecord, HierarchyNode, Level, SelectedFilter
from .levels import LevelSet

logger = logging.getLogger(__name__)

RecordLike = Union[FlatRecord, Mapping]


def _escape_key_part(part: Optional[str]) -> str:
    """Encode one key part so it can never contain the separator or pass for a missing part."""
    if not part:
        return MISSING_KEY_PART
    escaped = part.replace('\\', '\\\\').replace(':', '\\:')
    if escaped == MISSING_KEY_PART:
        return '\\' + escaped
    return escaped


def make_node_id(level: Level, *key_parts: Optional[str]) -> str:
    """
    Build a deterministic node id from the level and its composite key.

    Backslashes and colons inside a part are backslash-escaped and a literal
    '-' part becomes '\\-', so distinct keys always give distinct ids.

    Args:
        level: Level of the node
        *key_parts: Ancestor identifiers followed by the node's own key

    Returns:
        Id such as 'subcategory::Beverages::Soda'
    """
    parts = [level.value]
    parts.extend(_escape_key_part(part) for part in key_parts)
    return NODE_ID_SEPARATOR.join(parts)


def product_display_name(record: FlatRecord) -> str:
    """Leaf label: '<product_id> - <product_name>'."""
    return ' - '.join(part for part in (record.product_id, record.product_name) if part)


class HierarchyBuilder:
    """
    Builds the product forest from flat catalog rows.

    A single pass keeps one lookup map per level, so each row costs O(1)
    amortized. Rows missing intermediate fields attach higher up the chain
    instead of failing the build.
    """

    @staticmethod
    def coerce_records(records: Iterable[RecordLike]) -> List[FlatRecord]:
        """
        Accept FlatRecord instances or raw row mappings.

        Args:
            records: Rows from a row source

        Returns:
            List of FlatRecord
        """
        return [
            record if isinstance(record, FlatRecord) else FlatRecord.from_row(record)
            for record in records
        ]

    @staticmethod
    def build(
        records: Iterable[RecordLike],
        levels: Optional[LevelSet] = None
    ) -> List[HierarchyNode]:
        """
        Build the forest for the active levels.

        Args:
            records: Flat catalog rows, in the order children should appear
            levels: Levels to materialize (default: category/subcategory/product)

        Returns:
            Root category nodes in first-seen order
        """
        if levels is None:
            levels = LevelSet.default()

        use_subcategory = Level.SUBCATEGORY in levels
        use_class = Level.CLASS in levels
        use_product = Level.PRODUCT in levels

        categories: Dict[str, HierarchyNode] = {}
        subcategories: Dict[Tuple[str, str], HierarchyNode] = {}
        classes: Dict[Tuple[str, Optional[str], str], HierarchyNode] = {}
        products: Dict[Tuple[Optional[str], Optional[str]], HierarchyNode] = {}
        roots: List[HierarchyNode] = []

        for record in HierarchyBuilder.coerce_records(records):
            category_key = record.category_name or UNCATEGORIZED_LABEL

            category_node = categories.get(category_key)
            if category_node is None:
                category_node = HierarchyNode(
                    id=make_node_id(Level.CATEGORY, category_key),
                    name=category_key,
                    level=Level.CATEGORY,
                    data=SelectedFilter(
                        level=Level.CATEGORY,
                        category_id=category_key,
                        category_name=category_key,
                    ),
                )
                categories[category_key] = category_node
                roots.append(category_node)
            parent = category_node

            subcategory_key = record.subcategory_name if use_subcategory else None
            if subcategory_key:
                sub_map_key = (category_key, subcategory_key)
                subcategory_node = subcategories.get(sub_map_key)
                if subcategory_node is None:
                    subcategory_node = HierarchyNode(
                        id=make_node_id(Level.SUBCATEGORY, category_key, subcategory_key),
                        name=subcategory_key,
                        level=Level.SUBCATEGORY,
                        data=replace(
                            parent.data,
                            level=Level.SUBCATEGORY,
                            subcategory_id=subcategory_key,
                            subcategory_name=subcategory_key,
                        ),
                    )
                    subcategories[sub_map_key] = subcategory_node
                    parent.children.append(subcategory_node)
                parent = subcategory_node

            class_key = record.class_name if use_class else None
            if class_key:
                class_map_key = (category_key, subcategory_key, class_key)
                class_node = classes.get(class_map_key)
                if class_node is None:
                    class_node = HierarchyNode(
                        id=make_node_id(Level.CLASS, category_key, subcategory_key, class_key),
                        name=class_key,
                        level=Level.CLASS,
                        data=replace(
                            parent.data,
                            level=Level.CLASS,
                            class_id=class_key,
                            class_name=class_key,
                        ),
                    )
                    classes[class_map_key] = class_node
                    parent.children.append(class_node)
                parent = class_node

            if not use_product:
                continue

            # Rows without an id are keyed by name in a separate id namespace
            if record.product_id:
                product_key = (record.product_id, None)
                node_id = make_node_id(Level.PRODUCT, record.product_id)
            elif record.product_name:
                product_key = (None, record.product_name)
                node_id = make_node_id(Level.PRODUCT, None, record.product_name)
            else:
                logger.debug("Skipping product leaf for row without id or name: %r", record)
                continue
            if product_key in products:
                logger.debug("Duplicate product %r, keeping first occurrence", product_key)
                continue

            product_node = HierarchyNode(
                id=node_id,
                name=product_display_name(record),
                level=Level.PRODUCT,
                data=replace(
                    parent.data,
                    level=Level.PRODUCT,
                    product_id=record.product_id,
                    product_name=record.product_name,
                ),
            )
            products[product_key] = product_node
            parent.children.append(product_node)

        return roots
