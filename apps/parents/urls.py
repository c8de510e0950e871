from django.urls import path
from . import views

app_name = 'parents'

urlpatterns = [
    path('bind-child/', views.bind_child, name='bind-child'),
    path('children/', views.list_children, name='children'),
    path('children/<int:child_id>/', views.unbind_child, name='unbind-child'),
    path('children/<int:child_id>/points/', views.child_points, name='child-points'),
    path('children/<int:child_id>/ranking/', views.child_ranking, name='child-ranking'),
    path('children/<int:child_id>/transactions/', views.child_transactions, name='child-transactions'),
    path('children/<int:child_id>/orders/', views.child_orders, name='child-orders'),
]
