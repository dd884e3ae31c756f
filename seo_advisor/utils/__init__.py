"""
Utility functions for the SEO advisor.
"""

import re

# ---------------------------------------------------------------------------
# Field alias mapping: key names Gemini sometimes returns instead of the
# canonical snake_case field names of the analysis schemas.
#
# Aliases are applied after the snake_case conversion, so "SLUG" and "Slug"
# both end up as "url_slug".
# ---------------------------------------------------------------------------
FIELD_ALIASES: dict = {
    # focus_keyword
    "keyword": "focus_keyword",
    "primary_keyword": "focus_keyword",
    "main_keyword": "focus_keyword",
    # related_keywords
    "keywords": "related_keywords",
    "secondary_keywords": "related_keywords",
    # meta_description
    "description": "meta_description",
    "seo_description": "meta_description",
    "meta_desc": "meta_description",
    # url_slug
    "slug": "url_slug",
    # image_alt_text
    "alt_text": "image_alt_text",
    "image_alt": "image_alt_text",
}


def normalize_dict_keys(data: dict) -> dict:
    """
    Normalize top-level dictionary keys to snake_case for Pydantic validation,
    then apply :data:`FIELD_ALIASES`.

    Examples:
        'SEO_TITLE'          → 'seo_title'
        'metaDescription'    → 'meta_description'
        'FocusKeyword'       → 'focus_keyword'
        'SLUG'               → 'url_slug'      (via alias map)
        'url_slug'           → 'url_slug'

    Nested objects (subheadings, opening_paragraph_analysis) are left alone.

    Args:
        data: Dictionary whose keys should be normalised.

    Returns:
        New dictionary with canonical snake_case keys and the same values.
        Returns the input unchanged if it is not a dict.
    """
    if not isinstance(data, dict):
        return data

    normalized = {}
    for key, value in data.items():
        # "ABCDef" → "ABC_Def"
        s1 = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', str(key))
        # "camelCase" → "camel_Case"
        s2 = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', s1)
        snake_key = s2.lower()
        canonical_key = FIELD_ALIASES.get(snake_key, snake_key)
        # An exact canonical key always wins over an alias
        if canonical_key in normalized and snake_key != canonical_key:
            continue
        normalized[canonical_key] = value

    return normalized
