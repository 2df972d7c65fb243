from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ActivityTimelineViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'timeline', ActivityTimelineViewSet, basename='activity')

app_name = 'timeline'
urlpatterns = [
    path('', include(router.urls)),
]
