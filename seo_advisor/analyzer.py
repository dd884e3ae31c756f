"""
SEO analysis flow for a single article: prompt, one Gemini call, sanitize.
"""

import logging
from typing import Optional

from .clients.gemini import DEFAULT_MODEL, GeminiClient
from .sanitizer import AnalysisError, parse_analysis_response
from .schemas import AnalysisResult, ArticleInput, SchemaVariant, response_schema_for
from .seo_system import SEOPromptBuilder

logger = logging.getLogger(__name__)


class SEOAnalyzer:
    def __init__(self, gemini_client: GeminiClient,
                 prompt_builder: Optional[SEOPromptBuilder] = None,
                 model: str = DEFAULT_MODEL,
                 variant: SchemaVariant = SchemaVariant.STRUCTURED):
        self.gemini_client = gemini_client
        self.prompt_builder = prompt_builder or SEOPromptBuilder()
        self.model = model
        self.variant = SchemaVariant(variant)

    def is_ready(self) -> bool:
        return self.gemini_client.is_ready()

    def analyze(self, article: ArticleInput) -> AnalysisResult:
        """Run the analysis. Any failure propagates to the caller."""
        logger.info(f"🔍 Analyzing article: '{article.title}' ({len(article.content)} chars, {self.variant.value})")

        prompt = self.prompt_builder.build_prompt(
            article.title,
            article.content,
            permalink=article.permalink,
            variant=self.variant,
        )
        response = self.gemini_client.generate_structured_output(
            model=self.model,
            prompt=prompt,
            schema=response_schema_for(self.variant),
        )

        text = getattr(response, "text", None)
        if not text:
            raise AnalysisError("Model tidak mengembalikan teks apa pun.")

        result = parse_analysis_response(text, self.variant)
        logger.info(f"✅ Analysis complete. Focus keyword: '{result.focus_keyword}'")
        return result
