from django.urls import path

from . import views

app_name = 'auth'

urlpatterns = [
    path('login', views.LoginView.as_view(), name='login'),
    path('register', views.RegisterView.as_view(), name='register'),
    path('refresh', views.RefreshTokenView.as_view(), name='refresh'),
    path('me', views.CurrentUserView.as_view(), name='me'),
    path('logout', views.LogoutView.as_view(), name='logout'),
]
