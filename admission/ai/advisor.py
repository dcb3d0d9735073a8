import os
import json
import logging
from typing import Dict, Any, Optional, Sequence
import openai
from dotenv import load_dotenv

from ..logic.contracts import Subject
from .prompt_builder import build_system_prompt, build_user_prompt
from .safety_rules import EXTRACTION_INSTRUCTION

# Load env vars (if not already loaded)
load_dotenv()

logger = logging.getLogger(__name__)


def analysis_cache_key(subjects: Sequence[Subject], aps_score: int) -> str:
    """Signature of a scored subject list; order of subjects does not matter."""
    signature = sorted(f"{s.name}{s.mark:g}" for s in subjects)
    return f"analysis_{aps_score}_{json.dumps(signature)}"


class AIAdvisor:
    def __init__(self, api_key: Optional[str] = None, client=None):
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.client = client
        if self.client is None and self.api_key:
            self.client = openai.OpenAI(api_key=self.api_key)

        self.model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.max_tokens = int(os.getenv("ADVISOR_MAX_TOKENS", "1500"))
        self.temperature = float(os.getenv("ADVISOR_TEMPERATURE", "0.3"))

        # Simple in-memory cache: subject signature -> response
        self.cache: Dict[str, Dict[str, Any]] = {}

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def analyze_profile(self, subjects: Sequence[Subject], aps_score: int) -> Optional[Dict[str, Any]]:
        """
        Generates course, bursary and career recommendations for a scored profile.
        Returns None if API key is missing or error occurs.
        """
        if not self.client:
            logger.warning("OpenAI API key not found. Skipping profile analysis.")
            return None

        cache_key = analysis_cache_key(subjects, aps_score)
        if cache_key in self.cache:
            logger.info("Serving analysis from cache ⚡")
            return self.cache[cache_key]

        messages = [
            {"role": "system", "content": build_system_prompt()},
            {"role": "user", "content": build_user_prompt(subjects, aps_score)},
        ]
        parsed_content = self._complete_json(messages, temperature=self.temperature)
        if parsed_content is None:
            return None

        self.cache[cache_key] = parsed_content
        return parsed_content

    def extract_results(self, base64_data: str, mime_type: str) -> Optional[Dict[str, Any]]:
        """
        Reads name, ID number and subject marks from a results document image.
        Returns None if API key is missing or error occurs.
        """
        if not self.client:
            logger.warning("OpenAI API key not found. Skipping results extraction.")
            return None

        logger.info(f"[EXTRACT] Processing {mime_type} document...")
        messages = [
            {"role": "system", "content": EXTRACTION_INSTRUCTION},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Extract the results from this document."},
                    {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{base64_data}"}},
                ],
            },
        ]
        # Low temperature for deterministic extraction
        return self._complete_json(messages, temperature=0.1)

    def _complete_json(self, messages, temperature: float) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"}
            )

            content = response.choices[0].message.content
            if not content:
                logger.error("No content returned from model")
                return None

            parsed_content = json.loads(content)
            if not isinstance(parsed_content, dict):
                logger.error(f"Expected a JSON object from model, got {type(parsed_content).__name__}")
                return None

            return parsed_content

        except (openai.OpenAIError, json.JSONDecodeError) as e:
            logger.error(f"Error calling AI advisor: {e}")
            return None


# Singleton instance
advisor = AIAdvisor()
