# locations/models.py
from django.core.exceptions import ValidationError
from django.db import models


class Entity(models.Model):
    """
    Top-level administrative region (FBiH, RS, Brčko Distrikt)
    Entitet
    """
    code = models.SlugField(max_length=10, unique=True)
    name = models.CharField(max_length=100)
    order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['order', 'name']
        verbose_name_plural = "Entities"

    def __str__(self):
        return self.name


class Canton(models.Model):
    """
    Intermediate subdivision, only used inside the Federation
    Kanton
    """
    entity = models.ForeignKey(Entity, on_delete=models.CASCADE, related_name='cantons')
    name = models.CharField(max_length=100)
    order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['order', 'name']
        unique_together = ('entity', 'name')

    def __str__(self):
        return self.name


class City(models.Model):
    """
    Leaf location; belongs to one entity and optionally one canton
    Grad / općina
    """
    entity = models.ForeignKey(Entity, on_delete=models.PROTECT, related_name='cities')
    canton = models.ForeignKey(
        Canton,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='cities'
    )
    name = models.CharField(max_length=100)
    postal_code = models.CharField(max_length=10, blank=True)

    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)

    class Meta:
        ordering = ['name']
        verbose_name_plural = "Cities"
        unique_together = ('entity', 'name')

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        if self.canton_id and self.entity_id and self.canton.entity_id != self.entity_id:
            raise ValidationError({'canton': "Canton belongs to a different entity"})
