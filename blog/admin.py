# blog/admin.py
from django.contrib import admin
from .models import BlogCategory, BlogTag, BlogPost


@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'category', 'is_published', 'show_on_homepage', 'published_at']
    list_filter = ['is_published', 'show_on_homepage', 'category']
    search_fields = ['title', 'excerpt']
    prepopulated_fields = {'slug': ('title',)}
    filter_horizontal = ['tags']
    readonly_fields = ['published_at', 'created_at', 'updated_at']


admin.site.register(BlogCategory)
admin.site.register(BlogTag)
