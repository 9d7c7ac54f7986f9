from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from rest_framework_simplejwt.views import TokenRefreshView


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    path('api/users/', include('users.urls')),
    path('api/locations/', include('locations.urls')),     # entities, cantons, cities
    path('api/services/', include('services.urls')),       # service categories
    path('api/profiles/', include('profiles.urls')),       # public profiles + onboarding wizard
    path('api/directory/', include('directory.urls')),     # search, map, nearby
    path('api/blog/', include('blog.urls')),
    path('api/admin/', include('admin_api.urls')),
]

# Uploaded files in development only
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
