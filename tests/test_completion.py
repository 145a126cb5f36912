from types import SimpleNamespace

import httpx
from openai import APIConnectionError

from app.services.completion import OpenAICompletionProvider


def _response(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


class StubCompletions:
    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.kwargs = []

    async def create(self, **kwargs):
        self.kwargs.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.result


def _provider(completions):
    provider = OpenAICompletionProvider(api_key="sk-test", model="gpt-3.5-turbo", timeout=5)
    provider._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return provider


async def test_missing_key_is_a_failure():
    provider = OpenAICompletionProvider(api_key=None, model="gpt-3.5-turbo", timeout=5)
    result = await provider.complete("hi", 10)
    assert not result.ok
    assert "OPENAI_API_KEY" in result.error


async def test_success_is_trimmed():
    completions = StubCompletions(result=_response("  Следующий шаг.  "))
    result = await _provider(completions).complete("prompt", 100)

    assert result.ok
    assert result.text == "Следующий шаг."
    assert completions.kwargs == [
        {
            "model": "gpt-3.5-turbo",
            "messages": [{"role": "user", "content": "prompt"}],
            "max_tokens": 100,
        }
    ]


async def test_connection_error_is_a_failure():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    completions = StubCompletions(exc=APIConnectionError(request=request))

    result = await _provider(completions).complete("prompt", 100)

    assert not result.ok
    assert len(completions.kwargs) == 1


async def test_empty_answers_are_failures():
    assert not (await _provider(StubCompletions(result=_response())).complete("p", 1)).ok
    assert not (await _provider(StubCompletions(result=_response(None))).complete("p", 1)).ok
    assert not (await _provider(StubCompletions(result=_response(" \n"))).complete("p", 1)).ok
