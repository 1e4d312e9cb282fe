"""OpenAI client utilities for OpenAI-compatible chat-completions endpoints."""
from __future__ import annotations

import atexit
from functools import lru_cache

import httpx
from openai import OpenAI

_CHAT_COMPLETIONS_SUFFIX = "/chat/completions"


def _build_httpx_client() -> httpx.Client:
    """Create a pooled httpx client; the transport default timeout applies."""
    client = httpx.Client(
        limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        follow_redirects=True,
    )
    atexit.register(client.close)
    return client


def base_url_from_endpoint(api_endpoint: str) -> str:
    """Turn a full chat-completions URL into the base URL the SDK expects.

    ``https://api.openai.com/v1/chat/completions`` -> ``https://api.openai.com/v1``
    """
    url = (api_endpoint or "").strip().rstrip("/")
    if url.endswith(_CHAT_COMPLETIONS_SUFFIX):
        url = url[: -len(_CHAT_COMPLETIONS_SUFFIX)]
    return url


@lru_cache(maxsize=8)
def get_openai_client(api_key: str, api_endpoint: str) -> OpenAI:
    """Return a shared client per (key, endpoint), wired to the httpx client.

    Retries are disabled: a failed generation is surfaced to the caller, who
    decides whether to trigger it again.
    """
    if not api_key:
        raise ValueError("AI API key is not set")
    base_url = base_url_from_endpoint(api_endpoint)
    if not base_url:
        raise ValueError("AI API endpoint is not set")
    http_client = _build_httpx_client()
    client = OpenAI(api_key=api_key, base_url=base_url, http_client=http_client, max_retries=0)
    atexit.register(client.close)
    return client
