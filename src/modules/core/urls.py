from django.urls import path

from modules.core.views import AdminLoginView, health_check

urlpatterns = [
    path("health", health_check, name="health_check"),
    path("api/admin/login", AdminLoginView.as_view(), name="admin_login"),
]
