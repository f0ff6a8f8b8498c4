# techdroppin/settings/prod.py
from .base import *

DEBUG = False

_extra_hosts = [h.strip() for h in os.getenv("ALLOWED_HOSTS_EXTRA", "").split(",") if h.strip()]
ALLOWED_HOSTS = ALLOWED_HOSTS + _extra_hosts

if SECRET_KEY == 'CHANGE_ME_DEV_ONLY':
    raise RuntimeError("SECRET_KEY doit être défini en production.")

# Reverse proxy (si derrière un LB terminant TLS)
if env_flag('USE_X_FORWARDED_PROTO', default=True):
    SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
