from django.conf import settings
from django.db import models


class ParentChildQuerySet(models.QuerySet):
    def approved(self):
        return self.filter(is_approved=True)

    def pending(self):
        return self.filter(is_approved=False)


class ParentChild(models.Model):
    """Link between a parent account and a student; visible to the parent once approved"""
    RELATIONSHIP_FATHER = 'father'
    RELATIONSHIP_MOTHER = 'mother'
    RELATIONSHIP_OTHER = 'other'
    RELATIONSHIP_CHOICES = [
        (RELATIONSHIP_FATHER, 'Father'),
        (RELATIONSHIP_MOTHER, 'Mother'),
        (RELATIONSHIP_OTHER, 'Other'),
    ]

    parent = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='child_links'
    )
    child = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='parent_links'
    )
    relationship = models.CharField(max_length=20, choices=RELATIONSHIP_CHOICES, default=RELATIONSHIP_OTHER)
    is_approved = models.BooleanField(default=False)
    approved_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ParentChildQuerySet.as_manager()

    class Meta:
        db_table = 'parent_child'
        ordering = ['-created_at']
        unique_together = ['parent', 'child']
        verbose_name = 'Parent Child Binding'
        verbose_name_plural = 'Parent Child Bindings'

    def __str__(self):
        return f"{self.parent} -> {self.child} ({self.relationship})"
