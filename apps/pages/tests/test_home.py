from __future__ import annotations

from django.test import SimpleTestCase
from django.urls import reverse


class HomeViewTests(SimpleTestCase):
    def test_home_uses_base_layout(self) -> None:
        resp = self.client.get(reverse("pages:home"))
        self.assertEqual(resp.status_code, 200)
        self.assertTemplateUsed(resp, "pages/home.html")
        self.assertTemplateUsed(resp, "base.html")
        self.assertContains(resp, "<h1>Tech Droppin</h1>")
