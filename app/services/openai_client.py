import json
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from openai import OpenAI

from app.config import Settings
from app.utils.logger import logger


class ChatCompleter(ABC):
    """
    Boundary to the upstream chat-completion service.
    Returns the first choice's text, or None when the service sent nothing.
    """

    @abstractmethod
    def complete(self, messages: List[Dict[str, str]], model: str) -> Optional[str]:
        raise NotImplementedError


class OpenAIChatCompleter(ChatCompleter):

    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        self.max_tokens = settings.max_tokens
        self.temperature = settings.temperature
        self.client = client or OpenAI(
            api_key=settings.api_key,
            base_url=settings.base_url,
        )

    def complete(self, messages: List[Dict[str, str]], model: str) -> Optional[str]:
        logger.info(f"[OPENAI] Request started model={model}")

        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )

        logger.info("[OPENAI] Request completed")

        choices = getattr(response, "choices", None) or []
        if not choices:
            return None

        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None)


def describe_error(exc: BaseException) -> str:
    """
    Most specific detail available for an upstream failure:
    the service error payload, then the exception message, then str(exc).
    """
    body = getattr(exc, "body", None)
    if body:
        return body if isinstance(body, str) else json.dumps(body, ensure_ascii=False)

    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message

    return str(exc) or exc.__class__.__name__
