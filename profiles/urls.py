# profiles/urls.py
from django.urls import path
from .views import (
    PublicProfileDetailView, my_profile, wizard_step, gallery_upload, gallery_delete
)

urlpatterns = [
    # Owner - vlasnik profila
    path('me/', my_profile, name='profile-me'),
    path('me/wizard/<int:step>/', wizard_step, name='profile-wizard-step'),
    path('me/gallery/', gallery_upload, name='profile-gallery-upload'),
    path('me/gallery/<int:image_id>/', gallery_delete, name='profile-gallery-delete'),

    # Public - javni profil
    path('<slug:slug>/', PublicProfileDetailView.as_view(), name='profile-public-detail'),
]
