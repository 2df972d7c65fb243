from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import MarketingCampaignViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'campaigns', MarketingCampaignViewSet, basename='campaign')

app_name = 'campaigns'
urlpatterns = [
    path('', include(router.urls)),
]
