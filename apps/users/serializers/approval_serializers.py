"""
Serializers for registration review.
"""
from rest_framework import serializers

from .user_serializers import UserListSerializer


class PendingUserSerializer(UserListSerializer):
    """Used for: GET /api/admin/approvals/"""
    student_union_review = serializers.SerializerMethodField()

    class Meta(UserListSerializer.Meta):
        fields = UserListSerializer.Meta.fields + ['phone', 'student_union_review']
        read_only_fields = fields

    def get_student_union_review(self, obj):
        if not obj.has_role('student_union_member'):
            return None
        return obj.role_metadata('student_union_member')


class RejectSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
