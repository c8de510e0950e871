from django.urls import path
from . import views

app_name = 'parent_bindings'

urlpatterns = [
    path('', views.list_bindings, name='binding-list'),
    path('<int:pk>/approve/', views.approve_binding, name='approve-binding'),
]
