# blog/views.py
from rest_framework import generics
from rest_framework.permissions import AllowAny

from .models import BlogCategory, BlogTag, BlogPost
from .serializers import (
    BlogCategorySerializer, BlogTagSerializer,
    BlogPostListSerializer, BlogPostDetailSerializer
)

TRUE_VALUES = ('1', 'true', 'yes')


def published_posts():
    return BlogPost.objects.filter(is_published=True).select_related('category').prefetch_related('tags')


class BlogPostListView(generics.ListAPIView):
    """
    Published posts, newest first
    ?homepage=true, ?category=<slug>, ?tag=<slug>
    """
    serializer_class = BlogPostListSerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        queryset = published_posts().order_by('-published_at', '-id')
        params = self.request.query_params

        if params.get('homepage', '').lower() in TRUE_VALUES:
            queryset = queryset.filter(show_on_homepage=True)

        category = params.get('category')
        if category:
            queryset = queryset.filter(category__slug=category)

        tag = params.get('tag')
        if tag:
            queryset = queryset.filter(tags__slug=tag).distinct()

        return queryset


class BlogPostDetailView(generics.RetrieveAPIView):
    """Drafts are not found"""
    serializer_class = BlogPostDetailSerializer
    permission_classes = [AllowAny]
    lookup_field = 'slug'

    def get_queryset(self):
        return published_posts()


class BlogCategoryListView(generics.ListAPIView):
    queryset = BlogCategory.objects.all()
    serializer_class = BlogCategorySerializer
    permission_classes = [AllowAny]
    pagination_class = None


class BlogTagListView(generics.ListAPIView):
    queryset = BlogTag.objects.all()
    serializer_class = BlogTagSerializer
    permission_classes = [AllowAny]
    pagination_class = None
