from rest_framework import serializers

from apps.points.services import PointService
from ..models import ParentChild


class BindChildSerializer(serializers.Serializer):
    """
    Used for: POST /api/parent/bind-child/
    """
    student_id = serializers.CharField(max_length=50)
    relationship = serializers.ChoiceField(
        choices=ParentChild.RELATIONSHIP_CHOICES, default=ParentChild.RELATIONSHIP_OTHER
    )


class ParentChildSerializer(serializers.ModelSerializer):
    """A bound child with balances, as the parent sees it"""
    child_id = serializers.IntegerField(source='child.id', read_only=True)
    name = serializers.CharField(source='child.display_name', read_only=True)
    student_id = serializers.CharField(source='child.student_id', read_only=True)
    class_name = serializers.SerializerMethodField()
    points = serializers.SerializerMethodField()

    class Meta:
        model = ParentChild
        fields = [
            'id', 'child_id', 'name', 'student_id', 'class_name', 'relationship',
            'is_approved', 'approved_at', 'points', 'created_at'
        ]
        read_only_fields = fields

    def get_class_name(self, obj):
        school_class = obj.child.school_class
        return school_class.full_name if school_class else None

    def get_points(self, obj):
        # Balances stay hidden until the binding is approved
        if not obj.is_approved:
            return None
        return PointService.get_balance(obj.child)


class ParentBindingSerializer(serializers.ModelSerializer):
    """Admin view of a binding"""
    parent_name = serializers.CharField(source='parent.display_name', read_only=True)
    child_name = serializers.CharField(source='child.display_name', read_only=True)

    class Meta:
        model = ParentChild
        fields = [
            'id', 'parent', 'parent_name', 'child', 'child_name', 'relationship',
            'is_approved', 'approved_at', 'created_at'
        ]
        read_only_fields = fields
