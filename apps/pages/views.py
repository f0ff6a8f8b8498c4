# apps/pages/views.py
from __future__ import annotations

from django.views.generic import TemplateView


class HomeView(TemplateView):
    """
    Page d'accueil : le layout base.html place le bloc footer
    ({% render_block "custom_footer_bottom_block" %}).
    """
    template_name = "pages/home.html"
