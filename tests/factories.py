"""
Test factories for creating test data using factory_boy.
"""
import datetime

import factory
from factory import Faker, SubFactory
from factory.django import DjangoModelFactory
from django.contrib.auth import get_user_model

from apps.users.roles import get_or_create_role

User = get_user_model()

DEFAULT_PASSWORD = 'testpass123'


class GradeFactory(DjangoModelFactory):
    """Factory for creating grades."""

    class Meta:
        model = 'classes.Grade'
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f"Grade {n}")


class SchoolClassFactory(DjangoModelFactory):
    """Factory for creating classes."""

    class Meta:
        model = 'classes.SchoolClass'

    name = factory.Sequence(lambda n: f"Class {n}")
    grade = SubFactory(GradeFactory)


class UserFactory(DjangoModelFactory):
    """Factory for approved users; pass ``roles=[...]`` to assign role slugs."""

    class Meta:
        model = User
        django_get_or_create = ('username',)
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f"testuser{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    name = Faker('name')
    password = factory.django.Password(DEFAULT_PASSWORD)
    registration_status = User.STATUS_APPROVED
    is_active = True

    @factory.post_generation
    def roles(obj, create, extracted, **kwargs):
        if not create or not extracted:
            return
        for slug in extracted:
            obj.assign_role(get_or_create_role(slug))


class StudentFactory(UserFactory):
    """Approved student, optionally placed in ``school_class``."""
    student_id = factory.Sequence(lambda n: f"S{n:05d}")

    @factory.post_generation
    def roles(obj, create, extracted, **kwargs):
        if not create:
            return
        for slug in extracted or ['student']:
            obj.assign_role(get_or_create_role(slug))

    @factory.post_generation
    def school_class(obj, create, extracted, **kwargs):
        if not create or extracted is None:
            return
        from apps.classes.services import ClassService
        ClassService.add_student(extracted, obj)


class TeacherFactory(UserFactory):
    """Approved teacher teaching the classes passed as ``classes=[...]``."""

    @factory.post_generation
    def roles(obj, create, extracted, **kwargs):
        if not create:
            return
        for slug in extracted or ['teacher']:
            obj.assign_role(get_or_create_role(slug))

    @factory.post_generation
    def classes(obj, create, extracted, **kwargs):
        if not create or not extracted:
            return
        from apps.classes.models import ClassTeacher
        for school_class in extracted:
            ClassTeacher.objects.get_or_create(school_class=school_class, teacher=obj)


class ProductCategoryFactory(DjangoModelFactory):
    """Factory for creating product categories."""

    class Meta:
        model = 'products.ProductCategory'
        django_get_or_create = ('slug',)

    name = factory.Sequence(lambda n: f"Category {n}")
    slug = factory.Sequence(lambda n: f"category-{n}")


class ProductFactory(DjangoModelFactory):
    """Factory for creating active products."""

    class Meta:
        model = 'products.Product'

    name = factory.Sequence(lambda n: f"Product {n}")
    description = factory.Sequence(lambda n: f"Reward item number {n}")
    points_required = 100
    stock = 10
    category = SubFactory(ProductCategoryFactory)
    status = 'active'


class CouncilActivityFactory(DjangoModelFactory):
    """Factory for student council activities."""

    class Meta:
        model = 'council.CouncilActivity'

    title = factory.Sequence(lambda n: f"Activity {n}")
    start_date = factory.LazyFunction(datetime.date.today)
    end_date = factory.LazyFunction(datetime.date.today)
    location = 'School hall'
    max_participants = 10
    points_reward = 20
    status = 'active'
    organizer = SubFactory(UserFactory)


def give_points(user, amount, source='manual'):
    """Credit ``amount`` points to ``user`` through the points service."""
    from apps.points.services import PointService
    return PointService.add_points(user, amount, source)
