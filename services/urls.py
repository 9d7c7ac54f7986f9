# services/urls.py
from django.urls import path
from .views import ServiceCategoryListView, ServiceCategoryDetailView, category_tree

urlpatterns = [
    # Service Categories - Kategorije usluga
    path('categories/', ServiceCategoryListView.as_view(), name='service-categories'),
    path('categories/tree/', category_tree, name='service-category-tree'),
    path('categories/<int:id>/', ServiceCategoryDetailView.as_view(), name='service-category-detail'),
]
