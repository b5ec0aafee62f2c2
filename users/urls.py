# users/urls.py
"""
Auth endpoints. Tokens go in the Authorization header as 'Bearer <token>'.
"""
from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('login', views.LoginView.as_view(), name='login'),
    path('session', views.SessionView.as_view(), name='session'),
    path('logout', views.LogoutView.as_view(), name='logout'),
]
