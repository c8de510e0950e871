from django.conf import settings
from django.db import models
from django.utils import timezone


class CouncilActivityQuerySet(models.QuerySet):

    def active(self):
        return self.filter(status=CouncilActivity.STATUS_ACTIVE)

    def upcoming(self):
        return self.filter(start_date__gte=timezone.localdate())


class CouncilActivity(models.Model):
    """An event run by the student council; participants earn ``points_reward`` each"""
    STATUS_DRAFT = 'draft'
    STATUS_ACTIVE = 'active'
    STATUS_CLOSED = 'closed'
    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Draft'),
        (STATUS_ACTIVE, 'Active'),
        (STATUS_CLOSED, 'Closed'),
    ]

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    start_date = models.DateField(db_index=True)
    end_date = models.DateField()
    location = models.CharField(max_length=255)
    max_participants = models.PositiveIntegerField()
    points_reward = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT, db_index=True)
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='organized_council_activities'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CouncilActivityQuerySet.as_manager()

    class Meta:
        db_table = 'council_activities'
        ordering = ['-created_at', '-id']
        verbose_name = 'Council Activity'
        verbose_name_plural = 'Council Activities'

    def __str__(self):
        return self.title

    @property
    def is_closed(self):
        return self.status == self.STATUS_CLOSED

    def is_full(self):
        return self.participants.count() >= self.max_participants


class CouncilActivityParticipant(models.Model):
    activity = models.ForeignKey(CouncilActivity, on_delete=models.CASCADE, related_name='participants')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='council_participations'
    )
    points_awarded = models.BooleanField(default=False)
    awarded_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'council_activity_participants'
        ordering = ['created_at', 'id']
        unique_together = ['activity', 'user']
        verbose_name = 'Activity Participant'
        verbose_name_plural = 'Activity Participants'

    def __str__(self):
        return f"{self.user} @ {self.activity}"


class CouncilActivityPoint(models.Model):
    """Points credited to one participant for an activity"""
    activity = models.ForeignKey(CouncilActivity, on_delete=models.CASCADE, related_name='point_awards')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='council_point_awards'
    )
    amount = models.IntegerField(default=0)
    note = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'council_activity_points'
        ordering = ['-created_at', '-id']
        indexes = [models.Index(fields=['activity'])]
        verbose_name = 'Activity Point Award'
        verbose_name_plural = 'Activity Point Awards'

    def __str__(self):
        return f"{self.user} +{self.amount} ({self.activity})"
