# profiles/views.py
import logging

from django.db.models import Prefetch
from django.shortcuts import get_object_or_404
from rest_framework import generics, status, permissions
from rest_framework.decorators import api_view, permission_classes, parser_classes
from rest_framework.exceptions import ValidationError
from rest_framework.parsers import JSONParser, MultiPartParser, FormParser
from rest_framework.response import Response

from directory.visibility import visible_profiles
from .images import process_gallery_image, delete_image_file
from .models import Profile, ProfileService, GalleryImage
from .serializers import (
    ProfilePublicDetailSerializer, OwnerProfileSerializer, GalleryImageSerializer
)
from .wizard import submit_step, WizardError

logger = logging.getLogger('onboarding')


def profile_detail_queryset():
    return Profile.objects.select_related('business_city__entity').prefetch_related(
        Prefetch('profile_services', queryset=ProfileService.objects.select_related('category')),
        'working_hours', 'client_references', 'certificates', 'gallery',
    )


def _own_profile(request):
    return get_object_or_404(profile_detail_queryset(), user=request.user)


# ==================== Public ====================

class PublicProfileDetailView(generics.RetrieveAPIView):
    """
    Public profile page by slug, only for visible profiles
    GET /api/profiles/<slug>/
    """
    serializer_class = ProfilePublicDetailSerializer
    permission_classes = [permissions.AllowAny]
    lookup_field = 'slug'

    def get_queryset(self):
        return visible_profiles(profile_detail_queryset())


# ==================== Owner ====================

@api_view(['GET'])
@permission_classes([permissions.IsAuthenticated])
def my_profile(request):
    """
    Owner view with private fields and wizard progress
    GET /api/profiles/me/
    """
    profile = _own_profile(request)
    return Response(OwnerProfileSerializer(profile, context={'request': request}).data)


@api_view(['PUT'])
@permission_classes([permissions.IsAuthenticated])
@parser_classes([JSONParser, MultiPartParser, FormParser])
def wizard_step(request, step):
    """
    Submit one onboarding step
    PUT /api/profiles/me/wizard/<step>/
    """
    profile = get_object_or_404(Profile, user=request.user)

    try:
        submit_step(profile, step, request.data)
    except WizardError as e:
        return Response({
            "code": e.code,
            "detail": e.detail
        }, status=e.status_code)
    except ValidationError as e:
        return Response({
            "code": "validation_error",
            "detail": e.detail
        }, status=status.HTTP_400_BAD_REQUEST)

    profile = _own_profile(request)
    return Response({
        "status": "saved",
        "step": step,
        "registration_step": profile.registration_step,
        "registration_completed": profile.registration_completed,
        "profile": OwnerProfileSerializer(profile, context={'request': request}).data
    }, status=status.HTTP_200_OK)


# ==================== Gallery ====================

@api_view(['POST'])
@permission_classes([permissions.IsAuthenticated])
@parser_classes([MultiPartParser, FormParser])
def gallery_upload(request):
    """
    POST /api/profiles/me/gallery/
    """
    profile = get_object_or_404(Profile, user=request.user)
    serializer = GalleryImageSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({
            "code": "invalid_input",
            "detail": serializer.errors
        }, status=status.HTTP_400_BAD_REQUEST)

    image = process_gallery_image(serializer.validated_data['image'], profile.pk)
    item = serializer.save(profile=profile, image=image)
    logger.info("Gallery image %s added to profile %s", item.pk, profile.pk)

    return Response(
        GalleryImageSerializer(item, context={'request': request}).data,
        status=status.HTTP_201_CREATED
    )


@api_view(['DELETE'])
@permission_classes([permissions.IsAuthenticated])
def gallery_delete(request, image_id):
    """
    DELETE /api/profiles/me/gallery/<id>/
    """
    item = get_object_or_404(GalleryImage, id=image_id, profile__user=request.user)
    delete_image_file(item.image)
    item.delete()
    return Response(status=status.HTTP_204_NO_CONTENT)
