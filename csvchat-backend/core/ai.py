import logging
from functools import lru_cache
import google.generativeai as genai

from core.config import settings


class ProviderError(Exception):
    """Raised when the generative-AI provider cannot produce an answer."""


class GeminiProvider:
    """
    Text-in/text-out wrapper around a Gemini generative model.
    """

    def __init__(self, api_key: str, model_name: str):
        self.model_name = model_name
        if not api_key:
            raise ProviderError("GEMINI_API_KEY is not set")
        try:
            genai.configure(api_key=api_key)
            self._model = genai.GenerativeModel(model_name)
        except Exception as e:
            logging.error(f"Error configuring Gemini API: {e}")
            raise ProviderError(str(e)) from e

    def generate(self, prompt: str) -> str:
        try:
            response = self._model.generate_content(prompt)
        except Exception as e:
            logging.error(f"Error calling Gemini model {self.model_name}: {e}")
            raise ProviderError(str(e)) from e

        # .text raises ValueError when the response carries no text part
        try:
            return (response.text or "").strip()
        except ValueError as e:
            logging.warning(f"Gemini returned no text: {e}")
            return ""


@lru_cache(maxsize=1)
def get_provider() -> GeminiProvider:
    return GeminiProvider(api_key=settings.gemini_api_key, model_name=settings.gemini_model)
