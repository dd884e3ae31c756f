import logging
import os
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiClient:
    """Thin client for the Gemini API.

    Authenticates with a bare API key and issues exactly one request per
    call. Errors raised by the SDK are not caught here.
    """

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
        self.client = self._initialize_client()

    def _initialize_client(self) -> Optional[genai.Client]:
        """Initialize the GenAI client, or return None when no usable key exists."""
        if not self.api_key:
            logger.error("No Gemini API key found (GEMINI_API_KEY / API_KEY)")
            return None
        try:
            logger.info("Initializing Gemini with API key")
            return genai.Client(api_key=self.api_key)
        except Exception as e:
            logger.error(f"Error initializing Gemini client: {e}")
        return None

    def is_ready(self) -> bool:
        return self.client is not None

    def generate_content(self, model: str, contents: Any, config: Optional[types.GenerateContentConfig] = None) -> Any:
        """Send a single generate_content request."""
        if not self.client:
            raise RuntimeError("Gemini client not initialized")

        logger.info(f"Calling Gemini API (Model: {model})")
        return self.client.models.generate_content(
            model=model,
            contents=contents,
            config=config
        )

    def generate_structured_output(self, model: str, prompt: str, schema: Dict) -> Any:
        """Generate content constrained to a JSON schema."""
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_json_schema=schema,
        )
        return self.generate_content(model, prompt, config)

    def list_models(self) -> List[Any]:
        if not self.client:
            raise RuntimeError("Gemini client not initialized")
        return list(self.client.models.list())
