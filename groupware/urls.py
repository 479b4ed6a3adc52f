"""
URL configuration for the groupware project.
"""
from django.urls import include, path

urlpatterns = [
    path('', include('core.urls')),
]
