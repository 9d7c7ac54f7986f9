# users/urls.py
from django.urls import path
from .views import RegisterView, LoginView, CurrentUserView

urlpatterns = [
    path('register/', RegisterView.as_view(), name='user-register'),
    path('login/', LoginView.as_view(), name='user-login'),
    path('me/', CurrentUserView.as_view(), name='user-me'),
]
