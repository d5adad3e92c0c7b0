from django.urls import path

from modules.pricing.views import AdminPriceView, PublicPriceView

urlpatterns = [
    path("prices", PublicPriceView.as_view(), name="prices"),
    path("api/admin/prices", AdminPriceView.as_view(), name="admin_prices"),
]
