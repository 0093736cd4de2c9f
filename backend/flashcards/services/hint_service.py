"""
AI hints for flashcards.

The prompt is the configured template with ``{front_message}`` and
``{back_message}`` filled in from the card. It is sent to an
OpenAI-compatible chat completion endpoint and the first choice is returned
as-is.
"""
import logging
import re

import requests

from flashcards.core.config import Settings
from flashcards.core.exceptions import HintServiceError

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a helpful mentor who gives concise, recall-friendly hints for flashcards."
)

_PLACEHOLDER_RE = re.compile(r"\{(front|back)_message\}")


def build_hint_prompt(template: str | None, front: str, back: str) -> str:
    if not template:
        raise HintServiceError("Hint prompt template is not configured")
    values = {"front": front, "back": back}
    # One pass, so placeholder text inside a card is never substituted again.
    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(1)], template)


class HintGenerator:
    def __init__(
        self,
        *,
        api_key: str,
        template: str | None,
        base_url: str,
        model: str,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.template = template
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "HintGenerator":
        return cls(
            api_key=settings.HINT_API_KEY,
            template=settings.HINT_PROMPT_TEMPLATE,
            base_url=settings.HINT_BASE_URL,
            model=settings.HINT_MODEL,
            timeout=settings.HINT_TIMEOUT_SECONDS,
        )

    def generate(self, front: str, back: str) -> str:
        prompt = build_hint_prompt(self.template, front, back)
        if not self.api_key:
            raise HintServiceError("Hint service API key is not configured")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": prompt},
            ],
        }

        try:
            response = requests.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.error("Hint request failed: %s", e)
            raise HintServiceError(f"Hint service request failed: {e}") from e
        except ValueError as e:
            logger.error("Hint service returned invalid JSON: %s", e)
            raise HintServiceError("Hint service returned invalid JSON") from e

        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise HintServiceError("Hint service response has no completion") from e
