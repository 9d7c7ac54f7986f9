# services/serializers.py
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from .models import ServiceCategory, validate_parent


class ServiceCategorySerializer(serializers.ModelSerializer):
    """
    Serializer for service categories
    Kategorije usluga
    """
    parent_name = serializers.CharField(source='parent.name', read_only=True)

    class Meta:
        model = ServiceCategory
        fields = [
            'id',
            'name',
            'parent',
            'parent_name',
            'description',
            'is_active',
            'order'
        ]
        read_only_fields = ['id', 'parent_name']

    def validate(self, attrs):
        instance = self.instance or ServiceCategory()
        parent = attrs.get('parent', getattr(self.instance, 'parent', None))
        try:
            validate_parent(instance, parent)
        except DjangoValidationError as e:
            messages = e.message_dict if hasattr(e, 'error_dict') else {'parent': e.messages}
            raise serializers.ValidationError(messages)
        return attrs


class ServiceCategorySimpleSerializer(serializers.ModelSerializer):
    """
    Simple serializer (for dropdowns)
    """
    class Meta:
        model = ServiceCategory
        fields = ['id', 'name', 'parent']
