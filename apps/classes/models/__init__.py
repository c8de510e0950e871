"""
Class models module.

All models are exported from this module to maintain backward compatibility.
"""
from .grade import Grade
from .school_class import SchoolClass, ClassStudent, ClassTeacher

__all__ = [
    'Grade',
    'SchoolClass',
    'ClassStudent',
    'ClassTeacher',
]
