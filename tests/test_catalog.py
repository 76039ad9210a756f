"""
Tests for catalog filtering and sorting
"""
import unittest

from storefront.database.products import PRODUCTS, ProductDatabase
from storefront.models.product import FilterState, Product, SortKey
from storefront.services.catalog import filter_products, sort_products, toggle_value


def make_product(id, name, category="blazers", price=1000, rating=4.0, reviews=10,
                 brand="Test", colors=None, sizes=None):
    return Product(
        id=id,
        name=name,
        category=category,
        price=price,
        image=f"/{id}.jpg",
        rating=rating,
        reviews=reviews,
        brand=brand,
        colors=colors,
        sizes=sizes,
    )


class TestFilterProducts(unittest.TestCase):
    """Test cases for filter_products"""

    def setUp(self):
        self.blazer = make_product(1, "Classic Navy Blazer", price=12999, colors=["Navy", "Black"])
        self.shoe = make_product(2, "Oxford Shoes", category="shoes", price=9499, brand="Heritage")
        self.catalog = [self.blazer, self.shoe]

    def test_default_filter_hides_only_products_above_default_max(self):
        """Test that the default price range is the only default constraint"""
        result = filter_products(PRODUCTS, FilterState())
        expected = [p for p in PRODUCTS if p.price <= 30000]
        self.assertEqual({p.id for p in result}, {p.id for p in expected})
        self.assertLess(len(result), len(PRODUCTS))

    def test_result_is_subset_and_idempotent(self):
        """Test that filtering is pure across a range of filter states"""
        states = [
            FilterState(category="watches"),
            FilterState(search="black", sort_by=SortKey.PRICE_HIGH),
            FilterState(colors=["Navy", "Brown"], sizes=["M"]),
            FilterState(min_price=5000, max_price=9000, sort_by=SortKey.RATING),
            FilterState(category="ties", colors=["White"], sort_by=SortKey.REVIEWS),
        ]
        ids = {p.id for p in PRODUCTS}
        for state in states:
            first = filter_products(PRODUCTS, state)
            second = filter_products(PRODUCTS, state)
            self.assertTrue({p.id for p in first} <= ids)
            self.assertEqual(first, second)

    def test_category_filter(self):
        """Test filtering on the blazers category"""
        result = filter_products(self.catalog, FilterState(category="blazers"))
        self.assertEqual(result, [self.blazer])

    def test_search_matches_name_or_brand_case_insensitively(self):
        """Test search on name and brand"""
        self.assertEqual(filter_products(self.catalog, FilterState(search="NAVY")), [self.blazer])
        self.assertEqual(filter_products(self.catalog, FilterState(search="herit")), [self.shoe])
        self.assertEqual(filter_products(self.catalog, FilterState(search="velvet")), [])

    def test_price_range_is_inclusive(self):
        """Test that both price bounds are inclusive"""
        result = filter_products(self.catalog, FilterState(min_price=9499, max_price=12999))
        self.assertEqual(len(result), 2)

        result = filter_products(self.catalog, FilterState(min_price=9500, max_price=12998))
        self.assertEqual(result, [])

    def test_inverted_price_range_matches_nothing(self):
        """Test min above max"""
        result = filter_products(self.catalog, FilterState(min_price=20000, max_price=100))
        self.assertEqual(result, [])

    def test_empty_color_selection_places_no_constraint(self):
        """Test that an empty color list keeps products without colors"""
        result = filter_products(self.catalog, FilterState(colors=[]))
        self.assertIn(self.shoe, result)

    def test_color_selection_excludes_products_without_colors(self):
        """Test that a product with no color list fails a non-empty color filter"""
        result = filter_products(self.catalog, FilterState(colors=["Black"]))
        self.assertEqual(result, [self.blazer])

    def test_any_selected_color_is_enough(self):
        """Test OR semantics within the color dimension"""
        result = filter_products(self.catalog, FilterState(colors=["Gray", "Navy"]))
        self.assertEqual(result, [self.blazer])

    def test_size_selection_needs_a_declared_size(self):
        """Test that the size dimension filters like the color dimension"""
        sized = make_product(3, "Dress Trousers", category="trousers", sizes=["30", "32"])
        result = filter_products([self.blazer, sized], FilterState(sizes=["32", "34"]))
        self.assertEqual(result, [sized])

    def test_dimensions_combine_with_and(self):
        """Test that every dimension must match"""
        state = FilterState(category="blazers", colors=["Black"], max_price=10000)
        self.assertEqual(filter_products(self.catalog, state), [])

    def test_real_catalog_blazers_in_black(self):
        """Test a combined filter on the shipped catalog"""
        result = ProductDatabase().search_products(
            FilterState(category="blazers", colors=["Black"])
        )
        self.assertTrue(result)
        for product in result:
            self.assertEqual(product.category, "blazers")
            self.assertIn("Black", product.colors)


class TestSortProducts(unittest.TestCase):
    """Test cases for sort_products"""

    def setUp(self):
        self.products = [
            make_product(1, "charcoal tie", price=3000, rating=4.5, reviews=50),
            make_product(2, "Black Oxford", price=9000, rating=4.9, reviews=50),
            make_product(3, "Azure Watch", price=3000, rating=4.5, reviews=200),
        ]

    def ids(self, products):
        return [p.id for p in products]

    def test_name_sort_ignores_case(self):
        """Test ascending name order regardless of letter case"""
        self.assertEqual(self.ids(sort_products(self.products, SortKey.NAME)), [3, 2, 1])

    def test_price_low_keeps_ties_in_catalog_order(self):
        """Test ascending price with a stable tie-break"""
        self.assertEqual(self.ids(sort_products(self.products, SortKey.PRICE_LOW)), [1, 3, 2])

    def test_price_high(self):
        """Test descending price"""
        self.assertEqual(self.ids(sort_products(self.products, SortKey.PRICE_HIGH)), [2, 1, 3])

    def test_rating_keeps_ties_in_catalog_order(self):
        """Test descending rating with a stable tie-break"""
        self.assertEqual(self.ids(sort_products(self.products, SortKey.RATING)), [2, 1, 3])

    def test_reviews(self):
        """Test descending review count"""
        self.assertEqual(self.ids(sort_products(self.products, SortKey.REVIEWS)), [3, 1, 2])

    def test_unknown_key_sorts_by_name(self):
        """Test the fallback for an unrecognised sort key"""
        self.assertEqual(self.ids(sort_products(self.products, "bestselling")), [3, 2, 1])

    def test_sorting_does_not_mutate_input(self):
        """Test that the input list keeps its order"""
        sort_products(self.products, SortKey.PRICE_HIGH)
        self.assertEqual(self.ids(self.products), [1, 2, 3])


class TestToggleValue(unittest.TestCase):
    """Test cases for multi-select toggling"""

    def test_toggle_adds_then_removes(self):
        """Test that toggling twice restores the selection"""
        selected = toggle_value([], "Navy")
        self.assertEqual(selected, ["Navy"])
        selected = toggle_value(selected, "Black")
        self.assertEqual(selected, ["Navy", "Black"])
        self.assertEqual(toggle_value(selected, "Navy"), ["Black"])


if __name__ == '__main__':
    unittest.main()
