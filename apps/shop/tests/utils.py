"""
Test utilities and factories for creating test data
"""
import random
import string
from datetime import timedelta
from decimal import Decimal
from io import BytesIO

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from PIL import Image
from rest_framework.test import APIClient

from apps.shop.models import Category, Product, ProductImage, ProductVariant

User = get_user_model()


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=10):
        """Generate a random string"""
        return ''.join(random.choices(string.ascii_letters + string.digits, k=length))

    @staticmethod
    def create_user(username=None, password='testpass123', is_staff=True):
        """Create a panel user"""
        if not username:
            username = f'testuser_{TestDataFactory.random_string(6)}'
        return User.objects.create_user(
            username=username,
            email=f'{username}@test.com',
            password=password,
            is_staff=is_staff,
        )

    @staticmethod
    def create_category(name=None, **kwargs):
        """Create a test category"""
        if not name:
            name = f'Category {TestDataFactory.random_string(6)}'
        return Category.objects.create(name=name, **kwargs)

    @staticmethod
    def create_product(name=None, category=None, price=Decimal('100.00'), stock_quantity=10,
                       created_at=None, **kwargs):
        """
        Create a test product. `created_at` overrides the auto timestamp so
        tests can control the "newest" order.
        """
        if not name:
            name = f'Product {TestDataFactory.random_string(6)}'
        if category is None:
            category = TestDataFactory.create_category()
        product = Product.objects.create(
            name=name,
            category=category,
            price=price,
            stock_quantity=stock_quantity,
            **kwargs
        )
        if created_at is not None:
            Product.objects.filter(pk=product.pk).update(created_at=created_at)
            product.refresh_from_db()
        return product

    @staticmethod
    def create_variant(product, size='M', color='', stock_quantity=5, **kwargs):
        """Create a test variant"""
        return ProductVariant.objects.create(
            product=product,
            size=size,
            color=color,
            stock_quantity=stock_quantity,
            **kwargs
        )

    @staticmethod
    def create_image(product, url=None, display_order=0, is_primary=None):
        """Create a stored image reference"""
        return ProductImage.objects.create(
            product=product,
            image_url=url or f'/media/products/{TestDataFactory.random_string(8)}.jpg',
            display_order=display_order,
            is_primary=display_order == 0 if is_primary is None else is_primary,
        )

    @staticmethod
    def create_fashion_catalog():
        """
        Five products in three categories, created one day apart in this
        order (the last one is the newest).
        """
        vestidos = TestDataFactory.create_category('Vestidos')
        blusas = TestDataFactory.create_category('Blusas')
        saias = TestDataFactory.create_category('Saias')
        base = timezone.now() - timedelta(days=10)
        rows = [
            ('Vestido Floral', vestidos, Decimal('189.90'), 'Vestido leve estampado'),
            ('Blusa de Seda', blusas, Decimal('129.90'), 'Blusa elegante'),
            ('Vestido Longo Preto', vestidos, Decimal('259.90'), 'Para ocasiões especiais'),
            ('Saia Midi Plissada', saias, Decimal('149.90'), 'Combina com o vestido floral'),
            ('Vestido Curto Jeans', vestidos, Decimal('99.90'), 'Casual'),
        ]
        products = [
            TestDataFactory.create_product(
                name=name,
                category=category,
                price=price,
                description=description,
                created_at=base + timedelta(days=index),
            )
            for index, (name, category, price, description) in enumerate(rows)
        ]
        return {
            'categories': {'Vestidos': vestidos, 'Blusas': blusas, 'Saias': saias},
            'products': products,
        }

    @staticmethod
    def image_file(name='foto.jpg', size=(1600, 800), color='red', fmt='JPEG', content_type='image/jpeg'):
        """An in-memory uploaded image"""
        buffer = BytesIO()
        Image.new('RGB', size, color).save(buffer, format=fmt)
        return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)


class AuthenticatedAPIClient(APIClient):
    """APIClient with authentication helper"""

    def authenticate_user(self, user):
        """Authenticate the client with a user"""
        self.force_authenticate(user=user)
        return self

    def logout(self):
        """Remove authentication"""
        self.force_authenticate(user=None)
