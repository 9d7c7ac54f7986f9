# profiles/models.py
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Profile(models.Model):
    """
    Directory listing of an accounting professional
    Profil knjigovođe / računovođe
    """
    BUSINESS_TYPE_CHOICES = [
        ('individual', 'Individual'),
        ('company', 'Company'),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile'
    )
    slug = models.SlugField(max_length=140, unique=True)

    # Identity
    first_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100, blank=True)
    business_type = models.CharField(max_length=20, choices=BUSINESS_TYPE_CHOICES, default='individual')
    company_name = models.CharField(max_length=200, blank=True)

    # Descriptions
    short_description = models.CharField(max_length=150, blank=True)
    long_description = models.TextField(blank=True)

    # Contact
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=20, blank=True)  # E.164
    website = models.URLField(blank=True)

    # Private business data (never public)
    tax_id = models.CharField(max_length=20, blank=True)
    license_number = models.CharField(max_length=50, blank=True)
    personal_street = models.CharField(max_length=200, blank=True)
    personal_city = models.ForeignKey(
        'locations.City',
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='residents'
    )

    # Business address
    business_street = models.CharField(max_length=200, blank=True)
    business_city = models.ForeignKey(
        'locations.City',
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='business_profiles'
    )
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)

    # Work options
    works_online = models.BooleanField(default=False)
    has_physical_office = models.BooleanField(default=False)
    accepting_new_clients = models.BooleanField(default=True)
    years_experience = models.PositiveIntegerField(default=0)

    is_license_verified = models.BooleanField(default=False)
    profile_image = models.ImageField(upload_to='profiles/', null=True, blank=True)

    # Status
    is_active = models.BooleanField(default=True)
    registration_completed = models.BooleanField(default=False)
    registration_step = models.PositiveSmallIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    services = models.ManyToManyField(
        'services.ServiceCategory',
        through='ProfileService',
        related_name='profiles'
    )

    class Meta:
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['is_active', 'registration_completed'], name='profile_visibility_idx'),
        ]

    def __str__(self):
        return f"{self.display_name or self.user.email} ({self.slug})"

    @property
    def display_name(self):
        if self.business_type == 'company' and self.company_name.strip():
            return self.company_name.strip()
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def has_coordinates(self):
        return self.latitude is not None and self.longitude is not None


class ProfileService(models.Model):
    """Category offered by a profile"""
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='profile_services')
    category = models.ForeignKey(
        'services.ServiceCategory',
        on_delete=models.CASCADE,
        related_name='profile_services'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('profile', 'category')

    def __str__(self):
        return f"{self.profile_id} - {self.category.name}"


class WorkingHours(models.Model):
    """
    Working hours per weekday
    Radno vrijeme (1 = ponedjeljak .. 7 = nedjelja)
    """
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='working_hours')
    day_of_week = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(7)]
    )
    is_closed = models.BooleanField(default=False)
    open_time = models.TimeField(null=True, blank=True)
    close_time = models.TimeField(null=True, blank=True)

    class Meta:
        ordering = ['day_of_week']
        unique_together = ('profile', 'day_of_week')
        verbose_name_plural = "Working hours"


class ClientReference(models.Model):
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='client_references')
    client_name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']


class Certificate(models.Model):
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='certificates')
    name = models.CharField(max_length=200)
    issuer = models.CharField(max_length=200, blank=True)
    year = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        ordering = ['-year', 'name']


class GalleryImage(models.Model):
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='gallery')
    image = models.ImageField(upload_to='gallery/')
    caption = models.CharField(max_length=200, blank=True)
    display_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['display_order', 'id']
