# services/models.py
from django.core.exceptions import ValidationError
from django.db import models


def validate_parent(category, parent):
    """
    Enforce the single nesting level: a parent must be a main category,
    and a category that already has subcategories cannot become one.
    """
    if parent is None:
        return

    if category.pk and parent.pk == category.pk:
        raise ValidationError({'parent': "A category cannot be its own parent"})

    if parent.parent_id is not None:
        raise ValidationError({'parent': "Subcategories cannot have subcategories"})

    if category.pk and ServiceCategory.objects.filter(parent_id=category.pk).exists():
        raise ValidationError({'parent': "A category with subcategories cannot become a subcategory"})


class ServiceCategory(models.Model):
    """
    Service categories (e.g., Accounting -> Payroll)
    Kategorije usluga
    """
    name = models.CharField(max_length=100)
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True, blank=True,
        related_name='subcategories'
    )
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    order = models.PositiveIntegerField(default=0)  # Display order
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['order', 'name']
        verbose_name_plural = "Service Categories"
        unique_together = ('parent', 'name')

    def __str__(self):
        if self.parent_id:
            return f"{self.parent.name} / {self.name}"
        return self.name

    @property
    def is_main(self):
        return self.parent_id is None

    def clean(self):
        super().clean()
        validate_parent(self, self.parent)
