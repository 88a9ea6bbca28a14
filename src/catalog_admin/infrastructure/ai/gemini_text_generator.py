"""Gemini-backed implementation of TextGenerator.

One POST per call, no retry. Every failure mode (no API key, HTTP error,
timeout, unexpected response shape) is logged and reported as None.
"""

from __future__ import annotations

import logging

import requests

from catalog_admin.application.text_generation import TextGenerator

logger = logging.getLogger(__name__)

DESCRIPTION_PROMPT = """Generate a compelling and detailed product description for an e-commerce grocery store.

Product Details:
- Name: {name}
- Brand: {brand}
- Category: {category}

Requirements:
- Write 2-3 sentences
- Focus on key features, benefits, and quality
- Use professional, engaging language
- Highlight what makes this product special
- Keep it concise and informative

Generate only the description text, no additional formatting or labels."""

DISCLAIMER_PROMPT = """Generate a professional product disclaimer for an e-commerce grocery store selling {category} products.

Requirements:
- Keep it 1-2 sentences
- Cover accuracy of information and packaging differences
- Use standard e-commerce disclaimer language
- Be professional and clear
- Don't use quotation marks

Generate only the disclaimer text, no additional formatting or labels."""


class GeminiTextGenerator(TextGenerator):

    def __init__(self, api_key: str, api_url: str, timeout: float = 15.0) -> None:
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout

    def generate_description(self, name: str, brand: str, category: str) -> str | None:
        prompt = DESCRIPTION_PROMPT.format(name=name, brand=brand, category=category)
        return self._generate(prompt, "description")

    def generate_disclaimer(self, category: str) -> str | None:
        return self._generate(DISCLAIMER_PROMPT.format(category=category), "disclaimer")

    def _generate(self, prompt: str, purpose: str) -> str | None:
        if not self._api_key:
            logger.warning(
                "Gemini API key not set (CATALOG_ADMIN_GEMINI_API_KEY); skipping %s",
                purpose,
            )
            return None

        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            response = requests.post(
                self._api_url,
                params={"key": self._api_key},
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error generating product %s: %s", purpose, exc)
            return None

        return self._extract_text(data, purpose)

    @staticmethod
    def _extract_text(data: object, purpose: str) -> str | None:
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            logger.error("Gemini returned no %s text", purpose)
            return None
        if not isinstance(text, str):
            return None
        return text.strip() or None
