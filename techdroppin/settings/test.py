# techdroppin/settings/test.py
from .dev import *  # noqa: F401,F403

DEBUG = False

# Cache local en mémoire
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "tests",
        "TIMEOUT": 300,
    }
}

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Nom de site stable, indépendant de configs/site/
SITE_CONFIG_OVERRIDES = {"system.site": {"name": "Tech Droppin"}}
TIME_ZONE = "UTC"
BLOCKS_FOOTER_CLOSE_MENU_CONTAINER = False

LOGGING['loggers'].update({
    'blocks': {'handlers': ['console'], 'level': 'WARNING', 'propagate': False},
    'blocks.footer': {'handlers': ['console'], 'level': 'WARNING', 'propagate': False},
})
