from __future__ import annotations

from datetime import date, datetime

from django.test import SimpleTestCase

from apps.blocks.footer import renderer
from apps.blocks.footer.renderer import ALLOWED_TAGS, FooterTemplate, RenderedFragment, SiteIdentity


EXPECTED_TAGS = {
    "div", "script", "style", "link", "form", "h1", "h2", "h3", "h4", "h5",
    "table", "thead", "tr", "td", "tbody", "tfoot", "img", "a", "span",
    "option", "select", "input", "ul", "li", "br", "p", "hr",
}


class FooterRendererTests(SimpleTestCase):
    def test_markup_matches_observed_fragment(self) -> None:
        fragment = renderer.render("Example Co", date(2024, 6, 1))

        self.assertEqual(
            fragment.markup,
            '<div class="footer-copyright">'
            "<p>© 2024 Example Co. All Rights Reserved.</p>"
            '<div class="menu-footer">',
        )

    def test_copyright_notice_substring(self) -> None:
        fragment = renderer.render("Example Co", datetime(2024, 6, 1, 12, 0))
        self.assertIn("© 2024 Example Co. All Rights Reserved.", fragment.markup)

    def test_empty_site_name_renders_empty(self) -> None:
        fragment = renderer.render("", date(2030, 1, 1))
        self.assertIn("© 2030 . All Rights Reserved.", fragment.markup)

    def test_none_site_name_does_not_raise(self) -> None:
        fragment = renderer.render(None, date(2030, 1, 1))  # type: ignore[arg-type]
        self.assertIn("© 2030 . All Rights Reserved.", fragment.markup)

    def test_site_name_is_not_escaped(self) -> None:
        fragment = renderer.render('<b>Acme & "Co"</b>', date(2024, 1, 1))
        self.assertIn('© 2024 <b>Acme & "Co"</b>. All Rights Reserved.', fragment.markup)

    def test_cache_max_age_is_zero_for_any_input(self) -> None:
        for name in ("", "Example Co", "<script>x</script>", "Ünïcode ©"):
            with self.subTest(name=name):
                self.assertEqual(renderer.render(name, date(1999, 12, 31)).cache_max_age, 0)

    def test_allowed_tags_are_fixed_and_deduplicated(self) -> None:
        fragment = renderer.render("x", date(2024, 1, 1))
        self.assertEqual(set(fragment.allowed_tags), EXPECTED_TAGS)
        self.assertEqual(len(fragment.allowed_tags), 27)
        self.assertIs(fragment.allowed_tags, ALLOWED_TAGS)

    def test_year_is_four_digits(self) -> None:
        fragment = renderer.render("Old", date(987, 5, 1))
        self.assertIn("© 0987 Old.", fragment.markup)

    def test_same_inputs_give_equal_fragments(self) -> None:
        when = datetime(2024, 6, 1, 8, 30)
        results = [renderer.render("Example Co", when) for _ in range(5)]
        self.assertTrue(all(isinstance(r, RenderedFragment) for r in results))
        self.assertEqual(len(set(results)), 1)

    def test_close_menu_container_flag(self) -> None:
        open_markup = renderer.render("X", date(2024, 1, 1)).markup
        closed_markup = renderer.render("X", date(2024, 1, 1), close_menu_container=True).markup

        self.assertFalse(open_markup.endswith("</div>"))
        self.assertEqual(closed_markup, open_markup + "</div>")

    def test_template_can_opt_into_escaping(self) -> None:
        tpl = FooterTemplate(escape_site_name=True)
        fragment = renderer.render("<b>A</b>", date(2024, 1, 1), template=tpl)
        self.assertIn("© 2024 &lt;b&gt;A&lt;/b&gt;.", fragment.markup)


class SiteIdentityTests(SimpleTestCase):
    def test_from_config_false_or_none_is_empty(self) -> None:
        self.assertEqual(SiteIdentity.from_config(False).name, "")
        self.assertEqual(SiteIdentity.from_config(None).name, "")

    def test_from_config_keeps_value(self) -> None:
        self.assertEqual(SiteIdentity.from_config("Tech Droppin").name, "Tech Droppin")


class RendererModuleTests(SimpleTestCase):
    def test_non_string_site_name_is_stringified(self) -> None:
        fragment = renderer.render(42, date(2024, 1, 1))  # type: ignore[arg-type]
        self.assertIn("© 2024 42. All Rights Reserved.", fragment.markup)

    def test_modules_carry_docstrings(self) -> None:
        from apps.blocks import sanitizer

        self.assertIn("footer copyright", renderer.__doc__)
        self.assertIn("allowlist", sanitizer.__doc__)
