"""WSGI entry point.

Verifies the primary order store is reachable before accepting traffic.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.checks import check_primary_store  # noqa: E402

check_primary_store()
