"""
Class serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .class_serializers import (
    GradeSerializer, SchoolClassSerializer, SchoolClassDetailSerializer,
    ClassMemberSerializer, AssignTeacherSerializer, ClassStudentInputSerializer
)

__all__ = [
    'GradeSerializer',
    'SchoolClassSerializer',
    'SchoolClassDetailSerializer',
    'ClassMemberSerializer',
    'AssignTeacherSerializer',
    'ClassStudentInputSerializer',
]
