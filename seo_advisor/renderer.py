"""
Presentation renderer.

Maps a validated analysis result plus the original article body to the
ordered list of display blocks shown on the page. Nothing here touches the
network; the HTML markup itself lives in ``page.py``.
"""

import html
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .schemas import AnalysisResult, FlatAnalysisResult, StructuredAnalysisResult

MIN_WORD_COUNT = 600

_EMPHASIS_RE = re.compile(r'\*\*(.*?)\*\*')


@dataclass
class SuggestionItem:
    text: str
    is_suggestion: bool
    # Secondary line under the item, e.g. where to place a subheading
    detail: Optional[str] = None

    @property
    def css_class(self) -> str:
        return "suggestion" if self.is_suggestion else "good"


@dataclass
class ScoreBlock:
    title: str
    score: int
    recommendation: str


@dataclass
class QuoteBlock:
    title: str
    focus_keyword: str
    quote: str


@dataclass
class KeywordBlock:
    title: str
    keywords: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return ", ".join(self.keywords)


@dataclass
class ListBlock:
    title: str
    items: List[SuggestionItem] = field(default_factory=list)


DisplayBlock = Union[ScoreBlock, QuoteBlock, KeywordBlock, ListBlock]


def render_emphasis(text: str) -> str:
    """Escape ``text`` for HTML and turn ``**bold**`` markers into <strong> tags."""
    return _EMPHASIS_RE.sub(r'<strong>\1</strong>', html.escape(text))


def count_words(content: str) -> int:
    return len(content.split())


def word_count_item(content: str) -> SuggestionItem:
    words = count_words(content)
    if words < MIN_WORD_COUNT:
        return SuggestionItem(
            f"Panjang konten Anda {words} kata. Pertimbangkan untuk menambahkannya hingga **minimal {MIN_WORD_COUNT} kata**.",
            True,
        )
    return SuggestionItem(f"Panjang konten Anda {words} kata. Sudah bagus!", False)


def _basic_seo_items(result: AnalysisResult, content: str) -> List[SuggestionItem]:
    items = [
        SuggestionItem(f"Saran Judul SEO: **{result.seo_title}**", True),
        SuggestionItem(
            f"Saran Deskripsi Meta: **{result.meta_description}** ({len(result.meta_description)} karakter)",
            True,
        ),
        SuggestionItem(f"Saran URL: **{result.url_slug}**", True),
    ]
    if isinstance(result, StructuredAnalysisResult):
        if result.opening_paragraph_analysis.is_good:
            items.append(SuggestionItem(result.opening_paragraph_analysis.suggestion, False))
    else:
        items.append(SuggestionItem(result.opening_paragraph_suggestion, True))
    items.append(word_count_item(content))
    return items


def _subheading_items(result: AnalysisResult) -> List[SuggestionItem]:
    if isinstance(result, FlatAnalysisResult):
        return [SuggestionItem(f"Saran Subheading: **{sh}**", True) for sh in result.subheadings]
    return [
        SuggestionItem(f"Saran Subheading: **{sh.suggestion}**", True, detail=sh.placement_reason)
        for sh in result.subheadings
    ]


def _additional_seo_items(result: AnalysisResult) -> List[SuggestionItem]:
    return _subheading_items(result) + [
        SuggestionItem(f"Saran Alt Text Gambar: **{result.image_alt_text}**", True),
        SuggestionItem(result.keyword_density_suggestion, True),
        SuggestionItem("Pastikan Anda menambahkan **link internal** (link ke artikel lain di situs Anda).", True),
        SuggestionItem(
            "Anda sudah bagus dalam menautkan ke sumber eksternal. Pastikan setidaknya satu bersifat **DoFollow**.",
            False,
        ),
    ]


def _title_readability_items() -> List[SuggestionItem]:
    return [
        SuggestionItem("Kata kunci fokus muncul di **awal judul SEO**.", False),
        SuggestionItem(
            "Judul yang disarankan sudah mengandung **sentimen, power word, atau angka** untuk meningkatkan CTR.",
            False,
        ),
    ]


def _non_empty(items: List[SuggestionItem]) -> List[SuggestionItem]:
    return [item for item in items if item.text]


def build_display_blocks(result: AnalysisResult, content: str) -> List[DisplayBlock]:
    """
    Build the result cards in display order.

    Args:
        result: Validated analysis result (either variant)
        content: The article body as submitted, used for the word count

    Returns:
        Ordered list of display blocks
    """
    blocks: List[DisplayBlock] = []

    if isinstance(result, StructuredAnalysisResult):
        blocks.append(ScoreBlock(
            "🧠 Kekuatan Topik",
            result.topic_strength_score,
            result.topic_strength_recommendation,
        ))
        if not result.opening_paragraph_analysis.is_good:
            blocks.append(QuoteBlock(
                "📝 Saran Penulisan Ulang Paragraf Awal",
                result.focus_keyword,
                result.opening_paragraph_analysis.suggestion,
            ))

    blocks.append(KeywordBlock("✨ Rekomendasi Kata Kunci", result.all_keywords))
    blocks.append(ListBlock("✅ Basic SEO", _non_empty(_basic_seo_items(result, content))))
    blocks.append(ListBlock("➕ Additional SEO", _non_empty(_additional_seo_items(result))))
    blocks.append(ListBlock("⭐ Title Readability", _title_readability_items()))
    return blocks
