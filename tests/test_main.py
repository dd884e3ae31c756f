"""
Tests for the Gemini client wrapper, system initialization, the analyzer and the prompt builder.
"""

import json
import os
import unittest
from unittest.mock import patch, MagicMock

from seo_advisor.analyzer import SEOAnalyzer
from seo_advisor.clients.gemini import GeminiClient
from seo_advisor.main import initialize_system
from seo_advisor.sanitizer import AnalysisError
from seo_advisor.schemas import ArticleInput, SchemaVariant, StructuredAnalysisResult, response_schema_for
from seo_advisor.seo_system import SEOPromptBuilder


MOCK_DATA = {
    "focus_keyword": "cara membuat kopi",
    "related_keywords": ["kopi tubruk", "resep kopi", "kopi susu", "cara seduh kopi"],
    "seo_title": "Cara Membuat Kopi: Panduan Mudah",
    "meta_description": "Panduan lengkap cara membuat kopi enak di rumah.",
    "url_slug": "cara-membuat-kopi",
    "subheadings": [
        {"suggestion": "Bahan Cara Membuat Kopi", "placement_reason": "Di awal artikel."},
        {"suggestion": "Kesalahan Saat Membuat Kopi", "placement_reason": "Sebelum penutup."},
    ],
    "image_alt_text": "cara membuat kopi di rumah",
    "opening_paragraph_analysis": {"is_good": True, "suggestion": "Paragraf pembuka sudah bagus!"},
    "keyword_density_suggestion": "Kepadatan kata kunci sudah pas.",
    "topic_strength_score": 81,
    "topic_strength_recommendation": "Tambahkan perbandingan metode seduh.",
}


class TestGeminiClient(unittest.TestCase):
    """Test the GenAI SDK wrapper."""

    @patch('seo_advisor.clients.gemini.genai.Client')
    def test_generate_structured_output_single_call(self, mock_client_class):
        mock_response = MagicMock()
        mock_response.text = json.dumps(MOCK_DATA)
        mock_client = MagicMock()
        mock_client.models.generate_content.return_value = mock_response
        mock_client_class.return_value = mock_client

        client = GeminiClient("test_key")
        schema = response_schema_for(SchemaVariant.STRUCTURED)
        result = client.generate_structured_output("gemini-2.5-flash", "prompt", schema)

        self.assertEqual(result.text, json.dumps(MOCK_DATA))
        mock_client_class.assert_called_once_with(api_key="test_key")
        mock_client.models.generate_content.assert_called_once()
        kwargs = mock_client.models.generate_content.call_args.kwargs
        self.assertEqual(kwargs["model"], "gemini-2.5-flash")
        self.assertEqual(kwargs["contents"], "prompt")
        self.assertEqual(kwargs["config"].response_mime_type, "application/json")
        self.assertEqual(kwargs["config"].response_json_schema, schema)

    @patch('seo_advisor.clients.gemini.genai.Client')
    def test_errors_propagate_without_retry(self, mock_client_class):
        mock_client = MagicMock()
        mock_client.models.generate_content.side_effect = ConnectionError("network down")
        mock_client_class.return_value = mock_client

        client = GeminiClient("test_key")
        with self.assertRaises(ConnectionError):
            client.generate_structured_output("gemini-2.5-flash", "prompt", {})
        self.assertEqual(mock_client.models.generate_content.call_count, 1)

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_key_is_not_ready(self):
        client = GeminiClient()
        self.assertFalse(client.is_ready())
        with self.assertRaises(RuntimeError):
            client.generate_content("gemini-2.5-flash", "prompt")

    @patch.dict(os.environ, {"API_KEY": "legacy_key"}, clear=True)
    @patch('seo_advisor.clients.gemini.genai.Client')
    def test_api_key_env_fallback(self, mock_client_class):
        client = GeminiClient()
        self.assertTrue(client.is_ready())
        mock_client_class.assert_called_once_with(api_key="legacy_key")

    @patch('seo_advisor.clients.gemini.genai.Client', side_effect=ValueError("bad key"))
    def test_client_construction_failure_is_not_ready(self, _mock_client_class):
        client = GeminiClient("test_key")
        self.assertFalse(client.is_ready())


class TestInitializeSystem(unittest.TestCase):
    """Test component wiring in seo_advisor.main."""

    @patch('seo_advisor.main.GEMINI_API_KEY', None)
    @patch.dict(os.environ, {"API_KEY": "legacy_key"}, clear=True)
    @patch('seo_advisor.clients.gemini.genai.Client')
    def test_wires_components_with_api_key_fallback(self, mock_client_class):
        system = initialize_system(model="gemini-2.5-flash", variant="flat")

        mock_client_class.assert_called_once_with(api_key="legacy_key")
        self.assertTrue(system["gemini"].is_ready())
        self.assertIs(system["analyzer"].gemini_client, system["gemini"])
        self.assertIs(system["submissions"].analyzer, system["analyzer"])
        self.assertEqual(system["analyzer"].model, "gemini-2.5-flash")
        self.assertEqual(system["variant"], SchemaVariant.FLAT)
        self.assertEqual(system["analyzer"].variant, SchemaVariant.FLAT)

    @patch('seo_advisor.clients.gemini.genai.Client')
    def test_unknown_variant_falls_back_to_structured(self, _mock_client_class):
        system = initialize_system(api_key="test_key", variant="bogus")

        self.assertEqual(system["variant"], SchemaVariant.STRUCTURED)
        self.assertEqual(system["analyzer"].variant, SchemaVariant.STRUCTURED)

    @patch('seo_advisor.main.GEMINI_API_KEY', None)
    @patch.dict(os.environ, {}, clear=True)
    def test_missing_key_leaves_system_not_ready(self):
        system = initialize_system()
        self.assertFalse(system["analyzer"].is_ready())


class TestSEOAnalyzer(unittest.TestCase):

    def setUp(self):
        self.gemini = MagicMock()
        self.article = ArticleInput(title="Cara Membuat Kopi", content="Kopi adalah minuman.")

    def test_analyze_returns_validated_result(self):
        self.gemini.generate_structured_output.return_value = MagicMock(text=json.dumps(MOCK_DATA))
        analyzer = SEOAnalyzer(self.gemini)

        result = analyzer.analyze(self.article)

        self.assertIsInstance(result, StructuredAnalysisResult)
        self.assertEqual(result.topic_strength_score, 81)
        kwargs = self.gemini.generate_structured_output.call_args.kwargs
        self.assertEqual(kwargs["model"], "gemini-2.5-flash")
        self.assertEqual(kwargs["schema"], response_schema_for(SchemaVariant.STRUCTURED))
        self.assertIn("Judul Asli: Cara Membuat Kopi", kwargs["prompt"])

    def test_empty_response_raises(self):
        self.gemini.generate_structured_output.return_value = MagicMock(text="")
        with self.assertRaises(AnalysisError):
            SEOAnalyzer(self.gemini).analyze(self.article)

    def test_flat_variant_uses_flat_schema(self):
        self.gemini.generate_structured_output.side_effect = RuntimeError("stop")
        analyzer = SEOAnalyzer(self.gemini, variant=SchemaVariant.FLAT)

        with self.assertRaises(RuntimeError):
            analyzer.analyze(ArticleInput(title="T", content="C", permalink="https://contoh.com/kopi"))

        kwargs = self.gemini.generate_structured_output.call_args.kwargs
        self.assertEqual(kwargs["schema"], response_schema_for(SchemaVariant.FLAT))
        self.assertIn("Permalink: https://contoh.com/kopi", kwargs["prompt"])


class TestSEOPromptBuilder(unittest.TestCase):

    def setUp(self):
        self.builder = SEOPromptBuilder()

    def test_structured_prompt_embeds_raw_inputs(self):
        prompt = self.builder.build_prompt("Judul <b>Mentah</b>", "Isi {artikel}")
        self.assertIn("- Judul Asli: Judul <b>Mentah</b>", prompt)
        self.assertIn("- Isi Artikel: Isi {artikel}", prompt)

    def test_structured_prompt_lists_every_schema_key(self):
        prompt = self.builder.build_prompt("T", "C")
        for key in response_schema_for(SchemaVariant.STRUCTURED)["properties"]:
            self.assertIn(f'"{key}"', prompt)
        self.assertNotIn("Permalink", prompt)

    def test_flat_prompt_lists_every_schema_key(self):
        prompt = self.builder.build_prompt("T", "C", variant=SchemaVariant.FLAT)
        for key in response_schema_for(SchemaVariant.FLAT)["properties"]:
            self.assertIn(f'"{key}"', prompt)
        self.assertIn("- Permalink: (tidak ada)", prompt)
        self.assertNotIn("topic_strength_score", prompt)

    def test_empty_inputs_pass_through(self):
        prompt = self.builder.build_prompt("", "")
        self.assertIn("- Judul Asli: \n", prompt)
        self.assertIn("- Isi Artikel: \n", prompt)


if __name__ == '__main__':
    unittest.main()
