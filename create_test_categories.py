#!/usr/bin/env python
import os
import django

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')
django.setup()

from apps.shop.models import Category

CATEGORIES = ['Vestidos', 'Blusas', 'Saias', 'Calças', 'Acessórios']

if not Category.objects.exists():
    for order, name in enumerate(CATEGORIES):
        Category.objects.create(name=name, display_order=order)

    print('Categorias criadas com sucesso!')
    print(f'Total: {Category.objects.count()} categorias')
else:
    print(f'Já existem {Category.objects.count()} categorias')

for cat in Category.objects.all():
    print(f'  {cat.display_order}. {cat.name} ({cat.slug})')
