"""
Council activity serializers.
"""
from django.contrib.auth import get_user_model
from rest_framework import serializers

from ..models import CouncilActivity, CouncilActivityParticipant


class CouncilActivitySerializer(serializers.ModelSerializer):
    """
    Used for: GET/POST /api/student-council/activities/
    """
    organizer_name = serializers.CharField(source='organizer.display_name', read_only=True)
    participant_count = serializers.SerializerMethodField()
    max_participants = serializers.IntegerField(min_value=1)
    points_reward = serializers.IntegerField(min_value=0, default=0)

    class Meta:
        model = CouncilActivity
        fields = [
            'id', 'title', 'description', 'start_date', 'end_date', 'location',
            'max_participants', 'points_reward', 'status', 'organizer', 'organizer_name',
            'participant_count', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'organizer', 'created_at', 'updated_at']

    def get_participant_count(self, obj):
        return len(obj.participants.all())

    def validate(self, attrs):
        start_date = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end_date = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({'end_date': 'End date cannot be before the start date.'})
        return attrs


class CouncilParticipantSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(source='user.display_name', read_only=True)
    student_id = serializers.CharField(source='user.student_id', read_only=True, allow_null=True)

    class Meta:
        model = CouncilActivityParticipant
        fields = ['id', 'user_id', 'name', 'student_id', 'points_awarded', 'awarded_at', 'created_at']
        read_only_fields = fields


class CouncilActivityDetailSerializer(CouncilActivitySerializer):
    """Used for: GET /api/student-council/activities/{id}/"""
    participants = CouncilParticipantSerializer(many=True, read_only=True)

    class Meta(CouncilActivitySerializer.Meta):
        fields = CouncilActivitySerializer.Meta.fields + ['participants']


class ParticipantInputSerializer(serializers.Serializer):
    user_id = serializers.PrimaryKeyRelatedField(
        queryset=get_user_model().objects.all(), source='user'
    )


class AwardPointsSerializer(serializers.Serializer):
    note = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
