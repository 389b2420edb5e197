"""
URL configuration for config project.
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),

    # Scoring read API + manual points override
    path('api/', include('fantasy.api.urls')),
]
