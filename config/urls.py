"""
URL configuration for the ArtistHub API.

Everything except the admin and the health probe lives under /api/v1/
and answers with the JSON envelope from api.responses.
"""
from django.contrib import admin
from django.urls import path, include
from api import views as api_views

urlpatterns = [
    path('admin/', admin.site.urls),

    # Liveness probe
    path('health', api_views.health, name='health'),

    # Authentication API
    path('api/v1/auth/', include('api.urls')),

    # Artists, campaigns, revenue and timeline CRUD
    path('api/v1/', include('identity.urls')),
    path('api/v1/', include('campaigns.urls')),
    path('api/v1/', include('revenue.urls')),
    path('api/v1/', include('timeline.urls')),

    # Dashboard API
    path('api/v1/dashboard/', include('dashboard.urls')),
]

handler404 = 'api.views.not_found'
handler500 = 'api.views.server_error'
