"""
WSGI config for the wardrobe project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "wardrobe.settings")

application = get_wsgi_application()
