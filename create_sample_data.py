"""
Script to create the sample catalog used in manual testing.
Run with: python manage.py shell < create_sample_data.py
"""
from apps.shop.models import Category, Product, StoreSettings
from apps.shop.services.product_save import save_product

# Categories
print("Creating categories...")

categories = {}
for order, name in enumerate(['Vestidos', 'Blusas', 'Saias', 'Calças', 'Acessórios']):
    categories[name], _ = Category.objects.get_or_create(
        name=name,
        defaults={'display_order': order}
    )

# Products
print("Creating products...")

SIZES = ['P', 'M', 'G']

products = [
    {
        'name': 'Vestido Floral',
        'category': 'Vestidos',
        'price': '189.90',
        'compare_at_price': '229.90',
        'description': 'Vestido leve estampado, perfeito para o verão.',
        'is_featured': True,
        'stock': [3, 5, 2],
    },
    {
        'name': 'Blusa de Seda',
        'category': 'Blusas',
        'price': '129.90',
        'description': 'Blusa elegante de seda com caimento fluido.',
        'stock': [4, 4, 0],
    },
    {
        'name': 'Vestido Longo Preto',
        'category': 'Vestidos',
        'price': '259.90',
        'description': 'Para ocasiões especiais.',
        'stock': [1, 2, 1],
    },
    {
        'name': 'Saia Midi Plissada',
        'category': 'Saias',
        'price': '149.90',
        'description': 'Combina com o vestido floral.',
        'stock': [2, 3, 2],
    },
    {
        'name': 'Vestido Curto Jeans',
        'category': 'Vestidos',
        'price': '99.90',
        'description': 'Casual, para o dia a dia.',
        'stock': [5, 5, 5],
    },
]

for item in products:
    if Product.objects.filter(name=item['name']).exists():
        print(f"  Skipping {item['name']} (already exists)")
        continue

    save_product(
        {
            'name': item['name'],
            'category': categories[item['category']],
            'price': item['price'],
            'compare_at_price': item.get('compare_at_price'),
            'description': item['description'],
            'is_featured': item.get('is_featured', False),
        },
        variants=[
            {'size': size, 'stock_quantity': quantity, 'sku': f"{item['name'][:3].upper()}-{size}"}
            for size, quantity in zip(SIZES, item['stock'])
        ],
    )
    print(f"  Created {item['name']}")

# Store settings
if not StoreSettings.objects.exists():
    StoreSettings.load().save()
    print("Created store settings with defaults")

print("\n=== Sample data created ===")
print(f"Categories: {Category.objects.count()}")
print(f"Products: {Product.objects.count()}")
