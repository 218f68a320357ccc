from typing import Optional

from app.config import Settings
from app.services.language import detect_language
from app.services.openai_client import ChatCompleter, describe_error
from app.services.prompts import build_messages, build_system_prompt
from app.utils.logger import logger


class TutorError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class EmptyMessageError(TutorError):
    status_code = 400

    def __init__(self):
        super().__init__("Empty message")


class EmptyAnswerError(TutorError):
    status_code = 502

    def __init__(self):
        super().__init__("No answer from model")


class UpstreamError(TutorError):
    status_code = 500


class Tutor:
    """
    One question in, one answer out. Holds only the immutable settings,
    the rendered system prompt and the completion client.
    """

    def __init__(self, settings: Settings, completer: ChatCompleter):
        self.settings = settings
        self.completer = completer
        self.system_prompt = build_system_prompt(settings.topic)

    def ask(self, user_text: Optional[str]) -> str:
        text = (user_text or "").strip()
        if not text:
            logger.info("[ASK] Rejected empty message")
            raise EmptyMessageError()

        language = detect_language(text)
        logger.info(f"[ASK] language={language.value} chars={len(text)}")

        messages = build_messages(text, language, self.system_prompt)

        try:
            raw = self.completer.complete(messages, self.settings.model)
        except Exception as e:
            detail = describe_error(e)
            logger.error(f"[ASK] LLM error: {detail}")
            raise UpstreamError(detail) from e

        answer = (raw or "").strip()
        if not answer:
            logger.warning("[ASK] Model returned no content")
            raise EmptyAnswerError()

        return answer
