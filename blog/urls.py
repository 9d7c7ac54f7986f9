# blog/urls.py
from django.urls import path
from .views import BlogPostListView, BlogPostDetailView, BlogCategoryListView, BlogTagListView

urlpatterns = [
    path('posts/', BlogPostListView.as_view(), name='blog-posts'),
    path('posts/<slug:slug>/', BlogPostDetailView.as_view(), name='blog-post-detail'),
    path('categories/', BlogCategoryListView.as_view(), name='blog-categories'),
    path('tags/', BlogTagListView.as_view(), name='blog-tags'),
]
