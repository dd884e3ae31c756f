import unittest

from seo_advisor.utils import normalize_dict_keys


class TestNormalizeDictKeys(unittest.TestCase):

    def test_snake_case_conversion(self):
        data = normalize_dict_keys({"SEO_TITLE": "a", "metaDescription": "b", "FocusKeyword": "c"})
        self.assertEqual(data, {"seo_title": "a", "meta_description": "b", "focus_keyword": "c"})

    def test_aliases(self):
        data = normalize_dict_keys({"SLUG": "kopi", "alt_text": "gambar", "keywords": ["a"]})
        self.assertEqual(data, {"url_slug": "kopi", "image_alt_text": "gambar", "related_keywords": ["a"]})

    def test_canonical_key_wins_over_alias(self):
        data = normalize_dict_keys({"url_slug": "benar", "slug": "salah"})
        self.assertEqual(data["url_slug"], "benar")
        data = normalize_dict_keys({"slug": "salah", "url_slug": "benar"})
        self.assertEqual(data["url_slug"], "benar")

    def test_nested_values_untouched(self):
        nested = {"is_good": True, "suggestion": "ok"}
        data = normalize_dict_keys({"opening_paragraph_analysis": nested})
        self.assertIs(data["opening_paragraph_analysis"], nested)

    def test_non_dict_passthrough(self):
        self.assertEqual(normalize_dict_keys(["a"]), ["a"])


if __name__ == '__main__':
    unittest.main()
