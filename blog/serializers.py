# blog/serializers.py
from rest_framework import serializers
from .models import BlogCategory, BlogTag, BlogPost


class BlogCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = BlogCategory
        fields = ['id', 'name', 'slug']
        read_only_fields = ['id']
        extra_kwargs = {'slug': {'required': False}}


class BlogTagSerializer(serializers.ModelSerializer):
    class Meta:
        model = BlogTag
        fields = ['id', 'name', 'slug']
        read_only_fields = ['id']
        extra_kwargs = {'slug': {'required': False}}


class BlogPostListSerializer(serializers.ModelSerializer):
    category = BlogCategorySerializer(read_only=True)
    tags = BlogTagSerializer(many=True, read_only=True)

    class Meta:
        model = BlogPost
        fields = [
            'id', 'title', 'slug', 'excerpt', 'featured_image_url',
            'show_on_homepage', 'published_at', 'category', 'tags'
        ]


class BlogPostDetailSerializer(BlogPostListSerializer):
    class Meta(BlogPostListSerializer.Meta):
        fields = BlogPostListSerializer.Meta.fields + [
            'content', 'meta_description', 'meta_keywords'
        ]


class BlogPostAdminSerializer(serializers.ModelSerializer):
    """
    Create/edit posts from the back office; tags are sent as an id list
    """
    category = serializers.PrimaryKeyRelatedField(
        queryset=BlogCategory.objects.all(), required=False, allow_null=True
    )
    tags = serializers.PrimaryKeyRelatedField(
        queryset=BlogTag.objects.all(), many=True, required=False
    )
    author_email = serializers.EmailField(source='author.email', read_only=True, default=None)

    class Meta:
        model = BlogPost
        fields = [
            'id', 'title', 'slug', 'excerpt', 'content', 'featured_image_url',
            'is_published', 'show_on_homepage', 'published_at',
            'meta_description', 'meta_keywords', 'category', 'tags',
            'author_email', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'published_at', 'author_email', 'created_at', 'updated_at']
        extra_kwargs = {'slug': {'required': False}}

    def validate_slug(self, value):
        qs = BlogPost.objects.filter(slug=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if value and qs.exists():
            raise serializers.ValidationError("A post with this slug already exists")
        return value
