# admin_api/views.py
import logging

from django.db.models import Q
from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import status, permissions, generics
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from blog.models import BlogCategory, BlogTag, BlogPost
from blog.serializers import BlogCategorySerializer, BlogTagSerializer, BlogPostAdminSerializer
from directory.visibility import VISIBLE_Q
from locations.models import City
from locations.serializers import CitySerializer
from profiles.models import Profile
from profiles.services import delete_profile
from services.models import ServiceCategory
from services.serializers import ServiceCategorySerializer
from users.models import User
from .email_service import send_profile_notification, PROFILE_APPROVED, LICENSE_VERIFIED
from .serializers import (
    DashboardStatsSerializer,
    AdminProfileListSerializer,
    AdminProfileDetailSerializer,
)

logger = logging.getLogger('django')

TRUE_VALUES = ('1', 'true', 'yes')


# ==================== Admin Authentication ====================
class AdminLoginView(APIView):
    """Staff login, returns JWT"""
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        email = (request.data.get('email') or '').strip().lower()
        password = request.data.get('password')

        if not email or not password:
            return Response({
                'code': 'invalid_input',
                'detail': 'Email and password required'
            }, status=status.HTTP_400_BAD_REQUEST)

        user = User.objects.filter(email__iexact=email).first()
        if user is None or not user.check_password(password) or not user.is_staff:
            return Response({
                'code': 'invalid_credentials',
                'detail': 'Invalid credentials'
            }, status=status.HTTP_401_UNAUTHORIZED)

        if not user.is_active:
            return Response({
                'code': 'account_disabled',
                'detail': 'Account is disabled'
            }, status=status.HTTP_403_FORBIDDEN)

        user.last_login = timezone.now()
        user.save(update_fields=['last_login'])

        refresh = RefreshToken.for_user(user)
        return Response({
            'access': str(refresh.access_token),
            'refresh': str(refresh),
            'user': {
                'id': user.id,
                'email': user.email,
                'first_name': user.first_name,
                'last_name': user.last_name,
                'role': user.role,
            }
        })


# ==================== Dashboard Statistics ====================
@api_view(['GET'])
@permission_classes([permissions.IsAdminUser])
def dashboard_stats(request):
    now = timezone.now()
    month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    profiles = Profile.objects.all()
    data = {
        'total_profiles': profiles.count(),
        'visible_profiles': profiles.filter(VISIBLE_Q).count(),
        'inactive_profiles': profiles.filter(is_active=False).count(),
        'incomplete_profiles': profiles.filter(registration_completed=False).count(),
        'verified_profiles': profiles.filter(is_license_verified=True).count(),
        'new_profiles_this_month': profiles.filter(created_at__gte=month_start).count(),
        'published_posts': BlogPost.objects.filter(is_published=True).count(),
        'draft_posts': BlogPost.objects.filter(is_published=False).count(),
    }
    return Response(DashboardStatsSerializer(data).data)


# ==================== Profiles Management ====================
class AdminProfileListView(generics.ListAPIView):
    """
    All profiles regardless of visibility, newest first
    ?status=active|inactive|incomplete|visible&search=&is_license_verified=
    """
    serializer_class = AdminProfileListSerializer
    permission_classes = [permissions.IsAdminUser]

    def get_queryset(self):
        queryset = Profile.objects.select_related('user', 'business_city')
        params = self.request.query_params

        status_filter = params.get('status')
        if status_filter == 'active':
            queryset = queryset.filter(is_active=True)
        elif status_filter == 'inactive':
            queryset = queryset.filter(is_active=False)
        elif status_filter == 'incomplete':
            queryset = queryset.filter(registration_completed=False)
        elif status_filter == 'visible':
            queryset = queryset.filter(VISIBLE_Q)

        verified = params.get('is_license_verified')
        if verified:
            queryset = queryset.filter(is_license_verified=verified.lower() in TRUE_VALUES)

        search = params.get('search')
        if search:
            queryset = queryset.filter(
                Q(first_name__icontains=search) |
                Q(last_name__icontains=search) |
                Q(company_name__icontains=search) |
                Q(user__email__icontains=search) |
                Q(license_number__icontains=search)
            )

        return queryset.order_by('-created_at', '-id')


class AdminProfileDetailView(generics.RetrieveDestroyAPIView):
    """Profile details + delete (with the owner account)"""
    serializer_class = AdminProfileDetailSerializer
    permission_classes = [permissions.IsAdminUser]
    queryset = Profile.objects.select_related('user', 'business_city__entity')
    lookup_field = 'id'

    def destroy(self, request, *args, **kwargs):
        profile = self.get_object()
        profile_id = profile.id
        email = profile.user.email

        delete_profile(profile)
        logger.info("Admin %s deleted profile %s (%s)", request.user.pk, profile_id, email)

        return Response({
            'success': True,
            'profile_id': profile_id,
        }, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([permissions.IsAdminUser])
def toggle_profile_active(request, profile_id):
    """
    Activate/deactivate a profile; activating a completed profile
    notifies the owner
    """
    profile = get_object_or_404(Profile.objects.select_related('user'), id=profile_id)
    profile.is_active = not profile.is_active
    profile.save(update_fields=['is_active', 'updated_at'])

    email_sent = False
    if profile.is_active and profile.registration_completed:
        email_sent = send_profile_notification(profile, PROFILE_APPROVED)

    return Response({
        'profile_id': profile.id,
        'is_active': profile.is_active,
        'email_sent': email_sent,
    })


@api_view(['POST'])
@permission_classes([permissions.IsAdminUser])
def verify_license(request, profile_id):
    profile = get_object_or_404(Profile.objects.select_related('user'), id=profile_id)

    email_sent = False
    if not profile.is_license_verified:
        profile.is_license_verified = True
        profile.save(update_fields=['is_license_verified', 'updated_at'])
        email_sent = send_profile_notification(profile, LICENSE_VERIFIED)

    return Response({
        'profile_id': profile.id,
        'is_license_verified': True,
        'email_sent': email_sent,
    })


@api_view(['POST'])
@permission_classes([permissions.IsAdminUser])
def unverify_license(request, profile_id):
    profile = get_object_or_404(Profile, id=profile_id)
    profile.is_license_verified = False
    profile.save(update_fields=['is_license_verified', 'updated_at'])

    return Response({
        'profile_id': profile.id,
        'is_license_verified': False,
    })


# ==================== Cities Management ====================
class AdminCityListView(generics.ListCreateAPIView):
    queryset = City.objects.select_related('entity', 'canton').order_by('entity__order', 'name')
    serializer_class = CitySerializer
    permission_classes = [permissions.IsAdminUser]


class AdminCityDetailView(generics.RetrieveUpdateDestroyAPIView):
    queryset = City.objects.select_related('entity', 'canton')
    serializer_class = CitySerializer
    permission_classes = [permissions.IsAdminUser]
    lookup_field = 'id'


# ==================== Categories Management ====================
class AdminCategoryListView(generics.ListCreateAPIView):
    queryset = ServiceCategory.objects.select_related('parent')
    serializer_class = ServiceCategorySerializer
    permission_classes = [permissions.IsAdminUser]


class AdminCategoryDetailView(generics.RetrieveUpdateDestroyAPIView):
    queryset = ServiceCategory.objects.select_related('parent')
    serializer_class = ServiceCategorySerializer
    permission_classes = [permissions.IsAdminUser]
    lookup_field = 'id'


# ==================== Blog Management ====================
class AdminBlogPostListView(generics.ListCreateAPIView):
    """All posts, drafts included"""
    queryset = BlogPost.objects.select_related('category', 'author').prefetch_related('tags').order_by('-created_at')
    serializer_class = BlogPostAdminSerializer
    permission_classes = [permissions.IsAdminUser]

    def perform_create(self, serializer):
        serializer.save(author=self.request.user)


class AdminBlogPostDetailView(generics.RetrieveUpdateDestroyAPIView):
    queryset = BlogPost.objects.select_related('category', 'author').prefetch_related('tags')
    serializer_class = BlogPostAdminSerializer
    permission_classes = [permissions.IsAdminUser]
    lookup_field = 'id'


class AdminBlogCategoryListView(generics.ListCreateAPIView):
    queryset = BlogCategory.objects.all()
    serializer_class = BlogCategorySerializer
    permission_classes = [permissions.IsAdminUser]
    pagination_class = None


class AdminBlogTagListView(generics.ListCreateAPIView):
    queryset = BlogTag.objects.all()
    serializer_class = BlogTagSerializer
    permission_classes = [permissions.IsAdminUser]
    pagination_class = None
