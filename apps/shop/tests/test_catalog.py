from decimal import Decimal

from django.test import SimpleTestCase, TestCase

from apps.shop.services.catalog import (
    SORT_NAME,
    SORT_NEWEST,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
    catalog_snapshot,
    filter_by_category,
    filter_by_text,
    query_catalog,
    sort_products,
)
from apps.shop.tests.utils import TestDataFactory

# Newest first, as the snapshot delivers them
ITEMS = [
    {'id': 5, 'name': 'Vestido Curto Jeans', 'description': 'Casual', 'price': Decimal('99.90'), 'category_id': 1},
    {'id': 4, 'name': 'Saia Midi Plissada', 'description': 'Combina com o vestido floral', 'price': Decimal('149.90'), 'category_id': 3},
    {'id': 3, 'name': 'Vestido Longo Preto', 'description': 'Para ocasiões especiais', 'price': Decimal('259.90'), 'category_id': 1},
    {'id': 2, 'name': 'Blusa de Seda', 'description': 'Blusa elegante', 'price': Decimal('129.90'), 'category_id': 2},
    {'id': 1, 'name': 'Vestido Floral', 'description': 'Vestido leve estampado', 'price': Decimal('189.90'), 'category_id': 1},
]


def ids(items):
    return [item['id'] for item in items]


class CatalogQueryTests(SimpleTestCase):

    def test_defaults_return_everything_newest_first(self):
        self.assertEqual(ids(query_catalog(ITEMS)), [5, 4, 3, 2, 1])

    def test_text_search_matches_name_or_description(self):
        self.assertEqual(ids(filter_by_text(ITEMS, 'VESTIDO')), [5, 4, 3, 1])
        self.assertEqual(ids(filter_by_text(ITEMS, 'elegante')), [2])
        self.assertEqual(filter_by_text(ITEMS, 'inexistente'), [])

    def test_category_filter(self):
        self.assertEqual(ids(filter_by_category(ITEMS, 1)), [5, 3, 1])
        self.assertEqual(ids(filter_by_category(ITEMS, '2')), [2])
        self.assertEqual(ids(filter_by_category(ITEMS, 'all')), [5, 4, 3, 2, 1])

    def test_filters_commute(self):
        for category in ('all', 1, 2, 3):
            for text in ('', 'vestido', 'blusa', 'seda'):
                with self.subTest(category=category, text=text):
                    by_category = filter_by_category(ITEMS, category)
                    by_text = filter_by_text(ITEMS, text)
                    combined = filter_by_text(by_category, text)
                    self.assertEqual(combined, filter_by_category(by_text, category))
                    self.assertLessEqual(len(combined), min(len(by_category), len(by_text)))

    def test_sort_is_idempotent(self):
        for sort in (SORT_NEWEST, SORT_PRICE_ASC, SORT_PRICE_DESC, SORT_NAME):
            with self.subTest(sort=sort):
                once = sort_products(ITEMS, sort)
                self.assertEqual(sort_products(once, sort), once)

    def test_price_desc_reverses_price_asc(self):
        ascending = sort_products(ITEMS, SORT_PRICE_ASC)
        descending = sort_products(ITEMS, SORT_PRICE_DESC)
        self.assertEqual(ids(ascending), list(reversed(ids(descending))))
        self.assertEqual([item['price'] for item in ascending], sorted(item['price'] for item in ITEMS))

    def test_name_sort_ignores_accents(self):
        items = [{'name': 'Óculos'}, {'name': 'Anel'}, {'name': 'Pulseira'}, {'name': 'brinco'}]
        self.assertEqual(
            [item['name'] for item in sort_products(items, SORT_NAME)],
            ['Anel', 'brinco', 'Óculos', 'Pulseira'],
        )

    def test_unknown_sort_is_rejected(self):
        with self.assertRaises(ValueError):
            sort_products(ITEMS, 'random')

    def test_combined_query(self):
        result = query_catalog(ITEMS, category=1, search='vestido', sort=SORT_PRICE_ASC)
        self.assertEqual(ids(result), [5, 1, 3])

    def test_empty_input(self):
        self.assertEqual(query_catalog([], category=1, search='x', sort=SORT_NAME), [])


class CatalogSnapshotTests(TestCase):

    def setUp(self):
        self.data = TestDataFactory.create_fashion_catalog()

    def test_snapshot_is_newest_first(self):
        names = [product.name for product in catalog_snapshot()]
        self.assertEqual(names, [
            'Vestido Curto Jeans',
            'Saia Midi Plissada',
            'Vestido Longo Preto',
            'Blusa de Seda',
            'Vestido Floral',
        ])

    def test_snapshot_excludes_inactive_and_out_of_stock(self):
        products = self.data['products']
        products[0].is_active = False
        products[0].save()
        TestDataFactory.create_variant(products[1], size='P', stock_quantity=0)
        names = {product.name for product in catalog_snapshot()}
        self.assertNotIn('Vestido Floral', names)
        self.assertNotIn('Blusa de Seda', names)
        self.assertEqual(len(names), 3)

    def test_search_category_and_price_sort_on_fixture(self):
        vestidos = self.data['categories']['Vestidos']
        result = query_catalog(
            catalog_snapshot(), category=vestidos.pk, search='vestido', sort=SORT_PRICE_ASC
        )
        self.assertEqual(
            [product.name for product in result],
            ['Vestido Curto Jeans', 'Vestido Floral', 'Vestido Longo Preto'],
        )
