from django.urls import path

from . import views

app_name = 'dashboard'
urlpatterns = [
    path('metrics', views.dashboard_metrics, name='metrics'),
    path('activities', views.dashboard_activities, name='activities'),
    path('quick-actions', views.quick_actions, name='quick-actions'),
    path('user-profile', views.user_profile, name='user-profile'),
]
