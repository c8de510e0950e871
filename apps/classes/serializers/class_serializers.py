"""
Class serializers for list, detail and roster operations.
"""
from django.contrib.auth import get_user_model
from rest_framework import serializers

from ..models import Grade, SchoolClass, ClassStudent, ClassTeacher


class GradeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Grade
        fields = ['id', 'name', 'description', 'is_active']


class SchoolClassSerializer(serializers.ModelSerializer):
    """
    Used for: GET/POST /api/admin/classes/
    ``student_count`` and ``teacher_count`` come from ClassService.list_classes annotations.
    """
    grade_name = serializers.CharField(source='grade.name', read_only=True, default=None)
    full_name = serializers.CharField(read_only=True)
    head_teacher_name = serializers.SerializerMethodField()
    student_count = serializers.IntegerField(read_only=True, default=0)
    teacher_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = SchoolClass
        fields = [
            'id', 'name', 'grade', 'grade_name', 'full_name', 'head_teacher',
            'head_teacher_name', 'student_count', 'teacher_count', 'created_at'
        ]
        read_only_fields = ['id', 'created_at']

    def get_head_teacher_name(self, obj):
        return obj.head_teacher.display_name if obj.head_teacher_id else None


class ClassMemberSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    student_id = serializers.CharField(allow_null=True)
    subject = serializers.CharField(required=False, allow_blank=True)


class SchoolClassDetailSerializer(SchoolClassSerializer):
    """Used for: GET /api/admin/classes/{id}/"""
    students = serializers.SerializerMethodField()
    teachers = serializers.SerializerMethodField()

    class Meta(SchoolClassSerializer.Meta):
        fields = SchoolClassSerializer.Meta.fields + ['students', 'teachers']

    def get_students(self, obj):
        memberships = ClassStudent.objects.filter(school_class=obj).select_related('student')
        return [
            {'id': m.student.id, 'name': m.student.display_name, 'student_id': m.student.student_id}
            for m in memberships
        ]

    def get_teachers(self, obj):
        assignments = ClassTeacher.objects.filter(school_class=obj).select_related('teacher')
        return [
            {'id': a.teacher.id, 'name': a.teacher.display_name, 'subject': a.subject}
            for a in assignments
        ]


class AssignTeacherSerializer(serializers.Serializer):
    teacher_id = serializers.PrimaryKeyRelatedField(
        queryset=get_user_model().objects.all(), source='teacher'
    )
    subject = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')


class ClassStudentInputSerializer(serializers.Serializer):
    student_id = serializers.PrimaryKeyRelatedField(
        queryset=get_user_model().objects.all(), source='student'
    )
