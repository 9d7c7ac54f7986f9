# admin_api/urls.py
from django.urls import path
from . import views

urlpatterns = [
    # Auth
    path('login/', views.AdminLoginView.as_view(), name='admin-login'),

    # Dashboard
    path('dashboard/stats/', views.dashboard_stats, name='admin-dashboard-stats'),

    # Profiles - moderacija
    path('profiles/', views.AdminProfileListView.as_view(), name='admin-profiles'),
    path('profiles/<int:id>/', views.AdminProfileDetailView.as_view(), name='admin-profile-detail'),
    path('profiles/<int:profile_id>/toggle-active/', views.toggle_profile_active, name='admin-profile-toggle-active'),
    path('profiles/<int:profile_id>/verify-license/', views.verify_license, name='admin-profile-verify-license'),
    path('profiles/<int:profile_id>/unverify-license/', views.unverify_license, name='admin-profile-unverify-license'),

    # Cities
    path('cities/', views.AdminCityListView.as_view(), name='admin-cities'),
    path('cities/<int:id>/', views.AdminCityDetailView.as_view(), name='admin-city-detail'),

    # Service categories
    path('categories/', views.AdminCategoryListView.as_view(), name='admin-categories'),
    path('categories/<int:id>/', views.AdminCategoryDetailView.as_view(), name='admin-category-detail'),

    # Blog
    path('blog/posts/', views.AdminBlogPostListView.as_view(), name='admin-blog-posts'),
    path('blog/posts/<int:id>/', views.AdminBlogPostDetailView.as_view(), name='admin-blog-post-detail'),
    path('blog/categories/', views.AdminBlogCategoryListView.as_view(), name='admin-blog-categories'),
    path('blog/tags/', views.AdminBlogTagListView.as_view(), name='admin-blog-tags'),
]
