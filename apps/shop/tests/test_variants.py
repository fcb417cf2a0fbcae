from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase

from apps.shop.services.parsing import parse_decimal, parse_quantity
from apps.shop.services.variants import (
    VariantDraft,
    VariantList,
    aggregate_stock,
    parse_variants,
)
from apps.shop.tests.utils import TestDataFactory


class ParsingTests(SimpleTestCase):

    def test_parse_decimal(self):
        self.assertEqual(parse_decimal('100'), Decimal('100.00'))
        self.assertEqual(parse_decimal('89,9'), Decimal('89.90'))
        self.assertEqual(parse_decimal(' 10.005 '), Decimal('10.01'))
        self.assertIsNone(parse_decimal(''))
        self.assertIsNone(parse_decimal(None))

    def test_parse_decimal_rejects_garbage(self):
        for value in ['abc', 'NaN', 'Infinity', True, '-5']:
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_decimal(value)

    def test_parse_decimal_rejects_amounts_over_column_size(self):
        for value in ['1e30', '123456789012', '100000000', '99999999.995']:
            with self.subTest(value=value):
                with self.assertRaises(ValidationError) as ctx:
                    parse_decimal(value)
                self.assertEqual(ctx.exception.code, 'max_digits')
        with self.assertRaises(ValidationError):
            parse_decimal('-1e30', allow_negative=True)
        self.assertEqual(parse_decimal('99999999.99'), Decimal('99999999.99'))

    def test_parse_decimal_negative_allowed(self):
        self.assertEqual(parse_decimal('-10', allow_negative=True), Decimal('-10.00'))

    def test_parse_quantity(self):
        self.assertEqual(parse_quantity('7'), 7)
        self.assertEqual(parse_quantity(3), 3)
        self.assertEqual(parse_quantity(''), 0)
        self.assertEqual(parse_quantity(None), 0)

    def test_parse_quantity_rejects_invalid(self):
        for value in ['abc', '2.5', '-1', -1, False]:
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_quantity(value)

    def test_parse_quantity_upper_bound(self):
        self.assertEqual(parse_quantity('2147483647'), 2147483647)
        for value in ['2147483648', '99999999999999999999', 10 ** 20]:
            with self.subTest(value=value):
                with self.assertRaises(ValidationError) as ctx:
                    parse_quantity(value)
                self.assertEqual(ctx.exception.code, 'too_large')


class VariantListTests(SimpleTestCase):

    def test_add_remove_update(self):
        variants = VariantList().add().add(VariantDraft(size='G', stock_quantity=2))
        self.assertEqual(len(variants), 2)

        updated = variants.update(0, 'size', ' P ').update(0, 'stock_quantity', '4')
        self.assertEqual(updated[0], VariantDraft(size='P', stock_quantity=4))
        self.assertEqual(variants[0], VariantDraft())

        self.assertEqual(len(updated.remove(1)), 1)

    def test_update_unknown_field(self):
        with self.assertRaises(KeyError):
            VariantList().add().update(0, 'weight', '1')

    def test_update_invalid_stock(self):
        variants = VariantList().add()
        with self.assertRaises(ValidationError):
            variants.update(0, 'stock_quantity', 'abc')

    def test_price_adjustment_may_be_negative(self):
        variants = VariantList().add().update(0, 'price_adjustment', '-10,50')
        self.assertEqual(variants[0].price_adjustment, Decimal('-10.50'))

    def test_total_stock(self):
        variants = VariantList([VariantDraft(size='P', stock_quantity=3), VariantDraft(size='M', stock_quantity=5)])
        self.assertEqual(variants.total_stock, 8)


class AggregateStockTests(SimpleTestCase):

    def test_sums_variants(self):
        variants = [{'stock_quantity': 3}, {'stock_quantity': 5}, {'stock_quantity': 0}]
        self.assertEqual(aggregate_stock(variants, fallback=99), 8)

    def test_falls_back_without_variants(self):
        self.assertEqual(aggregate_stock([], fallback=12), 12)

    def test_zero_stock_variants_do_not_fall_back(self):
        self.assertEqual(aggregate_stock([{'stock_quantity': 0}], fallback=12), 0)


class ParseVariantsTests(SimpleTestCase):

    def test_parses_rows(self):
        variants = parse_variants([
            {'size': 'P', 'stock_quantity': '3'},
            {'size': 'M', 'stock_quantity': 5, 'price_adjustment': ''},
        ])
        self.assertEqual(variants.total_stock, 8)
        self.assertEqual(variants[1].price_adjustment, Decimal('0.00'))

    def test_collects_errors_per_row(self):
        with self.assertRaises(ValidationError) as ctx:
            parse_variants([
                {'size': 'P', 'stock_quantity': '3'},
                {'size': 'M', 'stock_quantity': 'muitos'},
            ])
        self.assertEqual(len(ctx.exception.messages), 1)
        self.assertTrue(ctx.exception.messages[0].startswith('Variação 2:'))


class ProductTotalStockTests(TestCase):

    def test_total_stock_uses_variants(self):
        product = TestDataFactory.create_product(stock_quantity=50)
        TestDataFactory.create_variant(product, size='P', stock_quantity=3)
        TestDataFactory.create_variant(product, size='M', stock_quantity=5)
        self.assertEqual(product.total_stock, 8)

    def test_total_stock_without_variants(self):
        product = TestDataFactory.create_product(stock_quantity=50)
        self.assertEqual(product.total_stock, 50)
