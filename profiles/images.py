# ===============================================
# profiles/images.py
# Provjera i obrada slika profila i galerije
# ===============================================

import os
import uuid
from io import BytesIO

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.base import ContentFile
from PIL import Image, ImageOps, UnidentifiedImageError

ALLOWED_FORMATS = ['JPEG', 'PNG', 'WEBP']
MIN_DIMENSION = 100
MAX_DIMENSION = 4000
QUALITY = 85
PROFILE_SIZE = (800, 800)
GALLERY_MAX_SIZE = (1600, 1600)


def validate_image_file(uploaded_file):
    """Size, extension, real format and dimensions of an uploaded image"""

    max_size = getattr(settings, 'MAX_IMAGE_SIZE', 5 * 1024 * 1024)
    if uploaded_file.size > max_size:
        raise ValidationError(f"Image too large. Maximum is {max_size // (1024 * 1024)}MB")

    extension = os.path.splitext(uploaded_file.name)[1].lower()
    allowed_extensions = getattr(settings, 'ALLOWED_IMAGE_EXTENSIONS', ['.jpg', '.jpeg', '.png'])
    if extension not in allowed_extensions:
        raise ValidationError("Unsupported file type. Allowed: " + ", ".join(allowed_extensions))

    try:
        uploaded_file.seek(0)
        image = Image.open(uploaded_file)
        image_format = image.format
        width, height = image.size
        image.verify()
    except (UnidentifiedImageError, OSError) as e:
        raise ValidationError(f"File is not a valid image: {e}")
    finally:
        uploaded_file.seek(0)

    if image_format not in ALLOWED_FORMATS:
        raise ValidationError("Unsupported image format. Allowed: " + ", ".join(ALLOWED_FORMATS))

    if width < MIN_DIMENSION or height < MIN_DIMENSION:
        raise ValidationError(f"Image too small. Minimum is {MIN_DIMENSION}x{MIN_DIMENSION} pixels")

    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise ValidationError(f"Image too large. Maximum is {MAX_DIMENSION}x{MAX_DIMENSION} pixels")

    return True


def _to_rgb(image):
    if image.mode in ('RGBA', 'LA', 'P'):
        # white background for transparent images
        if image.mode == 'P':
            image = image.convert('RGBA')
        background = Image.new('RGB', image.size, (255, 255, 255))
        background.paste(image, mask=image.split()[-1] if image.mode in ('RGBA', 'LA') else None)
        return background
    return image.convert('RGB')


def _crop_square(image):
    width, height = image.size
    side = min(width, height)
    left = (width - side) // 2
    top = (height - side) // 2
    return image.crop((left, top, left + side, top + side))


def _as_jpeg(image, prefix):
    output = BytesIO()
    image.save(output, format='JPEG', quality=QUALITY, optimize=True)
    return ContentFile(output.getvalue(), name=f"{prefix}_{uuid.uuid4().hex[:8]}.jpg")


def process_profile_image(uploaded_file, profile_id):
    """
    Square, EXIF-rotated 800x800 JPEG
    """
    image = ImageOps.exif_transpose(Image.open(uploaded_file))
    image = _crop_square(_to_rgb(image))
    image = image.resize(PROFILE_SIZE, Image.Resampling.LANCZOS)
    return _as_jpeg(image, f"profile_{profile_id}")


def process_gallery_image(uploaded_file, profile_id):
    """Downscaled JPEG keeping the aspect ratio"""
    image = _to_rgb(ImageOps.exif_transpose(Image.open(uploaded_file)))
    image.thumbnail(GALLERY_MAX_SIZE, Image.Resampling.LANCZOS)
    return _as_jpeg(image, f"gallery_{profile_id}")


def delete_image_file(field):
    """Remove the stored file behind an ImageField, if any"""
    if field and field.name:
        field.storage.delete(field.name)
