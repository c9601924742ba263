"""
ASGI config for forum_site project.
"""

# forum_site/asgi.py

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "forum_site.settings")

application = get_asgi_application()
