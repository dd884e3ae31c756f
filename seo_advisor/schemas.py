"""
Pydantic schemas for the SEO analysis contract.

The same models are used to build the JSON response schema sent to Gemini
and to validate the reply before rendering, so the two shapes never drift.
"""

from enum import Enum
from typing import List, Optional, Type, Union

from pydantic import BaseModel, Field


class SchemaVariant(str, Enum):
    """Response shapes understood by the advisor.

    STRUCTURED is the canonical shape. FLAT is the older shape with plain
    subheading strings and no topic scoring; it is kept for compatibility.
    """
    STRUCTURED = "structured"
    FLAT = "flat"


class ArticleInput(BaseModel):
    title: str = Field(description="Original article title as typed by the user")
    content: str = Field(description="Full article body text")
    permalink: Optional[str] = Field(default=None, description="Current article permalink (flat variant only)")


class SubheadingSuggestion(BaseModel):
    suggestion: str = Field(description="New H2/H3 subheading containing the focus keyword")
    placement_reason: str = Field(description="Where the subheading should be placed and why")


class OpeningParagraphAnalysis(BaseModel):
    is_good: bool = Field(description="True if the focus keyword already appears early in the opening paragraph")
    suggestion: str = Field(description="Full rewritten opening paragraph, or short praise when is_good is true")


class _BaseAnalysisResult(BaseModel):
    focus_keyword: str = Field(min_length=1, description="The single primary focus keyword")
    related_keywords: List[str] = Field(description="4 related short-tail and long-tail keywords")
    seo_title: str = Field(description="SEO title under 60 characters")
    meta_description: str = Field(description="Meta description, max 160 characters")
    url_slug: str = Field(description="Short URL slug containing the focus keyword")
    image_alt_text: str = Field(description="Image alt text containing the focus keyword")
    keyword_density_suggestion: str = Field(description="Short actionable keyword density advice")

    @property
    def all_keywords(self) -> List[str]:
        return [self.focus_keyword, *self.related_keywords]


class StructuredAnalysisResult(_BaseAnalysisResult):
    subheadings: List[SubheadingSuggestion] = Field(description="2 subheading suggestions with placement reasons")
    opening_paragraph_analysis: OpeningParagraphAnalysis
    topic_strength_score: int = Field(description="Topic comprehensiveness score from 1 to 100")
    topic_strength_recommendation: str = Field(description="One paragraph on how to deepen the topic")


class FlatAnalysisResult(_BaseAnalysisResult):
    subheadings: List[str] = Field(description="2 subheading suggestions")
    opening_paragraph_suggestion: str = Field(description="Advice or rewrite for the opening paragraph")


AnalysisResult = Union[StructuredAnalysisResult, FlatAnalysisResult]

RESULT_MODELS = {
    SchemaVariant.STRUCTURED: StructuredAnalysisResult,
    SchemaVariant.FLAT: FlatAnalysisResult,
}


def result_model_for(variant: SchemaVariant) -> Type[_BaseAnalysisResult]:
    return RESULT_MODELS[SchemaVariant(variant)]


def response_schema_for(variant: SchemaVariant) -> dict:
    """JSON schema handed to Gemini as ``response_json_schema``."""
    return result_model_for(variant).model_json_schema()
