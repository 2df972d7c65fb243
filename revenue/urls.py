from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import RevenueStreamViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'revenue', RevenueStreamViewSet, basename='revenue')

app_name = 'revenue'
urlpatterns = [
    path('', include(router.urls)),
]
