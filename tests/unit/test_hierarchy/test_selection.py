"""
Unit tests for hierarchy.selection module.
"""
import pytest
from core.models import FlatRecord, Level
from hierarchy.levels import LevelSet
from hierarchy.selection import SelectionResolver
from hierarchy.tree_builder import HierarchyBuilder
from hierarchy.tree_utils import find_node, iter_nodes


@pytest.fixture
def forest(scenario_records):
    return HierarchyBuilder.build(scenario_records, LevelSet.default())


@pytest.fixture
def full_forest(catalog_rows):
    return HierarchyBuilder.build(
        catalog_rows, LevelSet(['category', 'subcategory', 'class', 'product'])
    )


class TestSelect:
    """Tests for SelectionResolver.select."""

    def test_product_selection(self, forest):
        """Test selecting P1 yields the product-level filter."""
        p1 = find_node(forest, "product::P1")

        selection = SelectionResolver.select(p1)

        assert selection.level == Level.PRODUCT
        assert selection.category_name == "Beverages"
        assert selection.subcategory_name == "Soda"
        assert selection.product_id == "P1"
        assert selection.product_name == "Cola"

    def test_category_selection_stops_at_level(self, forest):
        """Test deeper fields stay unset for a category selection."""
        beverages = find_node(forest, "category::Beverages")

        selection = SelectionResolver.select(beverages)

        assert selection.level == Level.CATEGORY
        assert selection.category_id == "Beverages"
        assert selection.subcategory_id is None
        assert selection.subcategory_name is None
        assert selection.product_id is None

    def test_does_not_mutate_node(self, forest):
        """Test the node data is left untouched."""
        p1 = find_node(forest, "product::P1")
        before = p1.data

        selection = SelectionResolver.select(p1)

        assert selection is not before
        assert p1.data == before


class TestIsSelected:
    """Tests for SelectionResolver.is_selected."""

    def test_none_selection(self, forest):
        """Test nothing is selected without a selection."""
        assert not SelectionResolver.is_selected(forest[0], None)

    def test_sibling_product_not_selected(self, forest):
        """Test P2 is not selected when P1 is."""
        p1 = find_node(forest, "product::P1")
        p2 = find_node(forest, "product::P2")

        selection = SelectionResolver.select(p1)

        assert SelectionResolver.is_selected(p1, selection)
        assert not SelectionResolver.is_selected(p2, selection)

    def test_ancestors_not_selected(self, forest):
        """Test selecting a product does not mark its parents."""
        p1 = find_node(forest, "product::P1")
        selection = SelectionResolver.select(p1)

        assert not SelectionResolver.is_selected(find_node(forest, "category::Beverages"), selection)
        assert not SelectionResolver.is_selected(find_node(forest, "subcategory::Beverages::Soda"), selection)

    def test_descendants_not_selected(self, forest):
        """Test selecting a category does not mark its products."""
        selection = SelectionResolver.select(find_node(forest, "category::Beverages"))

        for node in iter_nodes(forest):
            expected = node.id == "category::Beverages"
            assert SelectionResolver.is_selected(node, selection) is expected

    def test_subcategory_ignores_deeper_fields(self, full_forest):
        """Test subcategory matching compares only category and subcategory."""
        soda = find_node(full_forest, "subcategory::Beverages::Soda")
        selection = SelectionResolver.select(soda)
        selection.class_id = "Cans"
        selection.product_id = "1001"

        assert SelectionResolver.is_selected(soda, selection)

    def test_same_name_different_parent(self, full_forest):
        """Test equal class names under different subcategories are distinct."""
        soda_bottles = find_node(full_forest, "class::Beverages::Soda::Bottles")
        juice_bottles = find_node(full_forest, "class::Beverages::Juice::Bottles")

        selection = SelectionResolver.select(soda_bottles)

        assert SelectionResolver.is_selected(soda_bottles, selection)
        assert not SelectionResolver.is_selected(juice_bottles, selection)

    def test_every_node_selects_itself(self, full_forest):
        """Test round trip for every node of the forest."""
        for node in iter_nodes(full_forest):
            assert SelectionResolver.is_selected(node, SelectionResolver.select(node))

    def test_same_level_siblings_never_selected(self, full_forest):
        """Test distinct nodes on the same level never share a selection."""
        nodes = list(iter_nodes(full_forest))
        for node in nodes:
            selection = SelectionResolver.select(node)
            for other in nodes:
                if other is not node and other.level == node.level:
                    assert not SelectionResolver.is_selected(other, selection)

    def test_products_without_id_told_apart(self):
        """Test selecting one id-less product does not select its siblings."""
        forest = HierarchyBuilder.build(
            [FlatRecord(None, "Alpha", "Cat"), FlatRecord(None, "Beta", "Cat")],
            LevelSet(['category', 'product'])
        )
        alpha, beta = forest[0].children

        selection = SelectionResolver.select(alpha)

        assert SelectionResolver.is_selected(alpha, selection)
        assert not SelectionResolver.is_selected(beta, selection)

    def test_survives_rebuild(self, scenario_records):
        """Test a selection still matches the equivalent node after a rebuild."""
        first = HierarchyBuilder.build(scenario_records, LevelSet.default())
        selection = SelectionResolver.select(find_node(first, "product::P2"))

        second = HierarchyBuilder.build(scenario_records, LevelSet.default())

        assert SelectionResolver.is_selected(find_node(second, "product::P2"), selection)


class TestClear:
    """Tests for SelectionResolver.clear."""

    def test_returns_none(self):
        """Test clear resets to no selection."""
        assert SelectionResolver.clear() is None
