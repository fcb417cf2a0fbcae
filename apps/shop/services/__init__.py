"""
Business logic shared by the REST API, the admin panel handlers and the
Django admin. Modules here must not import `apps.shop.models` at package
import time: the models import `slugs` and `variants` themselves.
"""
