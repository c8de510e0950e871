from django.urls import path
from . import views

app_name = 'approvals'

urlpatterns = [
    path('', views.ApprovalListView.as_view(), name='approval-list'),
    path('<int:pk>/approve/', views.ApproveUserView.as_view(), name='approve'),
    path('<int:pk>/reject/', views.RejectUserView.as_view(), name='reject'),
]
