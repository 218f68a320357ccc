from types import SimpleNamespace

import pytest

from app.services.openai_client import ChatCompleter, OpenAIChatCompleter, describe_error


class FakeCompletions:
    def __init__(self, response):
        self.response = response
        self.kwargs = []

    def create(self, **kwargs):
        self.kwargs.append(kwargs)
        return self.response


def _client(response):
    completions = FakeCompletions(response)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client, completions


def _response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_complete_passes_fixed_parameters(settings):
    client, completions = _client(_response("An apple."))
    completer = OpenAIChatCompleter(settings, client=client)
    messages = [{"role": "user", "content": "Hello"}]

    assert completer.complete(messages, "gpt-4o-mini") == "An apple."
    assert completions.kwargs == [
        {
            "model": "gpt-4o-mini",
            "messages": messages,
            "max_tokens": 700,
            "temperature": 0.2,
        }
    ]


def test_complete_returns_none_without_choices(settings):
    client, _ = _client(SimpleNamespace(choices=[]))
    completer = OpenAIChatCompleter(settings, client=client)

    assert completer.complete([], "m") is None


def test_complete_returns_none_without_content(settings):
    client, _ = _client(SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace())]))
    completer = OpenAIChatCompleter(settings, client=client)

    assert completer.complete([], "m") is None


def test_complete_propagates_errors(settings):
    class Boom:
        def create(self, **kwargs):
            raise TimeoutError("upstream timed out")

    client = SimpleNamespace(chat=SimpleNamespace(completions=Boom()))
    completer = OpenAIChatCompleter(settings, client=client)

    with pytest.raises(TimeoutError):
        completer.complete([], "m")


def test_describe_error_prefers_service_payload():
    exc = RuntimeError("Error code: 429")
    exc.body = {"message": "Rate limit reached", "type": "requests"}
    exc.message = "Error code: 429"

    assert describe_error(exc) == '{"message": "Rate limit reached", "type": "requests"}'


def test_describe_error_keeps_string_payload():
    exc = RuntimeError("x")
    exc.body = "Bad gateway"

    assert describe_error(exc) == "Bad gateway"


def test_describe_error_falls_back_to_message_then_str():
    exc = RuntimeError("plain")
    exc.message = "from message"
    assert describe_error(exc) == "from message"

    assert describe_error(ValueError("just str")) == "just str"
    assert describe_error(ValueError()) == "ValueError"


def test_chat_completer_is_abstract():
    with pytest.raises(TypeError):
        ChatCompleter()
