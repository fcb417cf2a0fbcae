import os
import shutil
import tempfile
from decimal import Decimal

from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse
from PIL import Image

from apps.shop.tests.utils import TestDataFactory

MEDIA_ROOT = tempfile.mkdtemp()


class PanelAuthTests(TestCase):

    def test_requires_login(self):
        for name, method in [
            ('shop:dashboard', 'get'),
            ('shop:image_upload', 'post'),
            ('shop:image_delete', 'post'),
        ]:
            with self.subTest(name=name):
                response = getattr(self.client, method)(reverse(name))
                self.assertEqual(response.status_code, 401)
                self.assertEqual(response.json(), {'status': 'error', 'message': 'Não autorizado'})


class DashboardTests(TestCase):

    def setUp(self):
        self.client.force_login(TestDataFactory.create_user())

    @override_settings(SHOP_LOW_STOCK_THRESHOLD=5)
    def test_stats(self):
        category = TestDataFactory.create_category('Vestidos')
        TestDataFactory.create_category('Antiga', is_active=False)
        floral = TestDataFactory.create_product('Vestido Floral', category=category, price=Decimal('100.00'), stock_quantity=0)
        TestDataFactory.create_variant(floral, size='P', stock_quantity=3)
        TestDataFactory.create_variant(floral, size='M', stock_quantity=5)
        TestDataFactory.create_product('Blusa', category=category, price=Decimal('50.00'), stock_quantity=2)
        TestDataFactory.create_product('Saia', category=category, price=Decimal('80.00'), stock_quantity=10, is_active=False)

        response = self.client.get(reverse('shop:dashboard'))
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['status'], 'ok')
        self.assertEqual(data['total_products'], 3)
        self.assertEqual(data['active_products'], 2)
        self.assertEqual(data['total_categories'], 1)
        self.assertEqual(data['low_stock_products'], 1)
        self.assertEqual(Decimal(data['total_value']), Decimal('1700.00'))
        self.assertEqual(len(data['recent_products']), 3)
        floral_row = next(row for row in data['recent_products'] if row['name'] == 'Vestido Floral')
        self.assertEqual(floral_row['stock_quantity'], 8)

    def test_post_not_allowed(self):
        response = self.client.post(reverse('shop:dashboard'))
        self.assertEqual(response.status_code, 405)


@override_settings(MEDIA_ROOT=MEDIA_ROOT, SHOP_MAX_PRODUCT_IMAGES=5, SHOP_MAX_UPLOAD_MB=5)
class ImageUploadTests(TestCase):

    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def setUp(self):
        self.client.force_login(TestDataFactory.create_user())

    def test_upload_resizes_and_stores(self):
        response = self.client.post(reverse('shop:image_upload'), {
            'images': [TestDataFactory.image_file('A.jpg'), TestDataFactory.image_file('B.png', fmt='PNG', content_type='image/png')],
        })
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['uploaded'], 2)
        self.assertEqual([image['alt'] for image in data['images']], ['A.jpg', 'B.png'])

        path = data['images'][0]['path']
        self.assertTrue(path.startswith('products/'))
        self.assertTrue(default_storage.exists(path))
        with default_storage.open(path) as stored:
            with Image.open(stored) as image:
                self.assertEqual(image.format, 'JPEG')
                self.assertLessEqual(max(image.size), 1200)

    def test_rejects_batch_over_limit(self):
        response = self.client.post(reverse('shop:image_upload'), {
            'images': [TestDataFactory.image_file(f'{index}.jpg') for index in range(3)],
            'existing': '3',
        })
        self.assertEqual(response.status_code, 400)
        self.assertIn('no máximo 5 imagens', response.json()['message'])

    def test_rejects_negative_existing_count(self):
        before = self.stored_files()
        response = self.client.post(reverse('shop:image_upload'), {
            'images': [TestDataFactory.image_file(f'{index}.jpg') for index in range(6)],
            'existing': '-10',
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Valor inválido para existing')
        self.assertEqual(self.stored_files(), before)

    def test_rejects_wrong_content_type(self):
        document = SimpleUploadedFile('nota.pdf', b'%PDF-1.4', content_type='application/pdf')
        response = self.client.post(reverse('shop:image_upload'), {'images': [document]})
        self.assertEqual(response.status_code, 400)
        self.assertIn('nota.pdf', response.json()['message'])

    def stored_files(self):
        return sorted(name for _, _, names in os.walk(MEDIA_ROOT) for name in names)

    def test_rejects_unreadable_image(self):
        before = self.stored_files()
        broken = SimpleUploadedFile('quebrada.jpg', b'not an image', content_type='image/jpeg')
        response = self.client.post(reverse('shop:image_upload'), {
            'images': [TestDataFactory.image_file('ok.jpg'), broken],
        })
        self.assertEqual(response.status_code, 400)
        self.assertIn('quebrada.jpg', response.json()['message'])
        self.assertEqual(self.stored_files(), before)

    def test_requires_files(self):
        response = self.client.post(reverse('shop:image_upload'))
        self.assertEqual(response.status_code, 400)

    def test_delete(self):
        upload = self.client.post(reverse('shop:image_upload'), {
            'images': [TestDataFactory.image_file('A.jpg')],
        }).json()['images'][0]

        response = self.client.post(reverse('shop:image_delete'), {'path': upload['path']})
        self.assertEqual(response.json(), {'status': 'ok', 'removed': True})
        self.assertFalse(default_storage.exists(upload['path']))

        response = self.client.post(reverse('shop:image_delete'), {'path': upload['path']})
        self.assertEqual(response.json(), {'status': 'ok', 'removed': False})

    def test_delete_outside_uploads_is_ignored(self):
        response = self.client.post(reverse('shop:image_delete'), {'path': '../settings.py'})
        self.assertEqual(response.json(), {'status': 'ok', 'removed': False})
