from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ArtistViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'artists', ArtistViewSet)

app_name = 'identity'
urlpatterns = [
    path('', include(router.urls)),
]
