"""
URL configuration for techdroppin project.

- /blocks/<block_id>/ : fragment HTML d'un bloc enregistré
- /                   : pages (layout base.html avec le footer)
"""
from django.urls import include, path

urlpatterns = [
    path("blocks/", include(("apps.blocks.urls", "blocks"), namespace="blocks")),
    path("", include(("apps.pages.urls", "pages"), namespace="pages")),
]
