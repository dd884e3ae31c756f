"""
Response sanitizer: turns Gemini's JSON text into a validated analysis result.
"""

import json
import logging

from pydantic import ValidationError

from .schemas import AnalysisResult, SchemaVariant, result_model_for
from .utils import normalize_dict_keys

logger = logging.getLogger(__name__)

META_DESCRIPTION_LIMIT = 160
ELLIPSIS = "..."


class AnalysisError(Exception):
    """Raised when a single analysis submission cannot be completed."""


def truncate_meta_description(text: str, limit: int = META_DESCRIPTION_LIMIT) -> str:
    """
    Bound a meta description to ``limit`` characters without splitting a word.

    Longer text is cut back to the last space inside the first ``limit``
    characters and gets ``...`` appended. When there is no usable space in
    that window, the hard cutoff is used instead of an empty prefix.
    """
    if len(text) <= limit:
        return text

    window = text[:limit]
    last_space = window.rfind(" ")
    if last_space > 0:
        window = window[:last_space]
    else:
        logger.warning(f"No word boundary in first {limit} chars of meta description, using hard cutoff")
    return window + ELLIPSIS


def parse_analysis_response(raw_text: str, variant: SchemaVariant = SchemaVariant.STRUCTURED) -> AnalysisResult:
    """Parse, fix up and validate the model's JSON reply for one submission."""
    if raw_text is None:
        raise AnalysisError("Respons model kosong.")

    text = raw_text.strip()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AnalysisError(f"Respons model bukan JSON yang valid: {e}") from e

    if not isinstance(data, dict):
        raise AnalysisError("Respons model harus berupa objek JSON.")

    data = normalize_dict_keys(data)

    meta = data.get("meta_description")
    if isinstance(meta, str) and len(meta) > META_DESCRIPTION_LIMIT:
        data["meta_description"] = truncate_meta_description(meta)
        logger.info(f"✂️ Meta description truncated from {len(meta)} to {len(data['meta_description'])} chars")

    try:
        return result_model_for(variant).model_validate(data)
    except ValidationError as e:
        raise AnalysisError(f"Respons model tidak sesuai skema: {e.error_count()} kesalahan validasi") from e
