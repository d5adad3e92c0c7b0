import django_filters

from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    status = django_filters.CharFilter(field_name="status", lookup_expr="iexact")
    size = django_filters.CharFilter(field_name="size", lookup_expr="iexact")
    zip = django_filters.CharFilter(field_name="zip")
    city = django_filters.CharFilter(field_name="city", lookup_expr="iexact")
    date = django_filters.DateFilter(field_name="date")
    created_from = django_filters.DateFilter(
        field_name="created_at", lookup_expr="date__gte"
    )
    created_to = django_filters.DateFilter(
        field_name="created_at", lookup_expr="date__lte"
    )

    class Meta:
        model = Order
        fields = [
            "status",
            "size",
            "zip",
            "city",
            "date",
            "created_from",
            "created_to",
        ]
