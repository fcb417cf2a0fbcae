from django.urls import path
from . import views

app_name = 'shop'

urlpatterns = [
    # Panel home
    path('dashboard/', views.dashboard_data, name='dashboard'),

    # Product images
    path('imagens/upload/', views.image_upload, name='image_upload'),
    path('imagens/remover/', views.image_delete, name='image_delete'),
]
