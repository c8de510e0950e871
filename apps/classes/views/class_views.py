"""
Class management views with RESTful API design.
"""
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.views import APIView

from apps.common.exceptions import BusinessRuleError
from apps.common.permissions import IsSchoolAdmin
from apps.common.utils import success_response, error_response, query_id
from ..models import Grade
from ..serializers import (
    GradeSerializer, SchoolClassSerializer, SchoolClassDetailSerializer,
    AssignTeacherSerializer, ClassStudentInputSerializer
)
from ..services import ClassService


class SchoolClassViewSet(viewsets.ModelViewSet):
    """
    RESTful API for class management.

    Endpoints:
    - GET /api/admin/classes/?grade={id} - List classes with roster counts
    - POST /api/admin/classes/ - Create class
    - GET /api/admin/classes/{id}/ - Class detail with students and teachers
    - PUT/PATCH /api/admin/classes/{id}/ - Update class
    - DELETE /api/admin/classes/{id}/ - Delete class and its roster
    - POST/DELETE /api/admin/classes/{id}/teachers/ - Assign or remove a teacher
    - POST/DELETE /api/admin/classes/{id}/students/ - Add or remove a student
    """
    permission_classes = [IsSchoolAdmin]

    def get_queryset(self):
        return ClassService.list_classes(query_id(self.request, 'grade'))

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return SchoolClassDetailSerializer
        return SchoolClassSerializer

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return success_response(serializer.data, 'Class list retrieved successfully')

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Class created successfully', status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return success_response(serializer.data, 'Class retrieved successfully')

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Class updated successfully')

    def destroy(self, request, *args, **kwargs):
        ClassService.delete_class(self.get_object())
        return success_response(None, 'Class deleted successfully')

    @action(detail=True, methods=['post', 'delete'])
    def teachers(self, request, pk=None):
        school_class = self.get_object()
        serializer = AssignTeacherSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        teacher = serializer.validated_data['teacher']

        try:
            if request.method == 'POST':
                ClassService.assign_teacher(
                    school_class, teacher, serializer.validated_data.get('subject', '')
                )
                return success_response(None, 'Teacher assigned successfully', status.HTTP_201_CREATED)
            ClassService.remove_teacher(school_class, teacher)
            return success_response(None, 'Teacher removed successfully')
        except BusinessRuleError as e:
            return error_response(str(e))

    @action(detail=True, methods=['post', 'delete'])
    def students(self, request, pk=None):
        school_class = self.get_object()
        serializer = ClassStudentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        student = serializer.validated_data['student']

        try:
            if request.method == 'POST':
                ClassService.add_student(school_class, student)
                return success_response(None, 'Student added successfully', status.HTTP_201_CREATED)
            ClassService.remove_student(school_class, student)
            return success_response(None, 'Student removed successfully')
        except BusinessRuleError as e:
            return error_response(str(e))


class GradeListView(APIView):
    """GET /api/admin/classes/grades/"""
    permission_classes = [IsSchoolAdmin]

    def get(self, request):
        grades = Grade.objects.filter(is_active=True)
        return success_response(GradeSerializer(grades, many=True).data)
