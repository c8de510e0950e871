from django.contrib import admin

from .models import CouncilActivity, CouncilActivityParticipant, CouncilActivityPoint


class ParticipantInline(admin.TabularInline):
    model = CouncilActivityParticipant
    extra = 0
    readonly_fields = ['points_awarded', 'awarded_at']


@admin.register(CouncilActivity)
class CouncilActivityAdmin(admin.ModelAdmin):
    list_display = ['title', 'start_date', 'end_date', 'location', 'points_reward', 'status', 'organizer']
    list_filter = ['status', 'start_date']
    search_fields = ['title', 'location']
    inlines = [ParticipantInline]


@admin.register(CouncilActivityPoint)
class CouncilActivityPointAdmin(admin.ModelAdmin):
    list_display = ['activity', 'user', 'amount', 'created_at']
    readonly_fields = ['activity', 'user', 'amount', 'note', 'created_at']
