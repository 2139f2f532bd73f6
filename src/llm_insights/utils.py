import json
from typing import Any, Iterable
from pydantic import BaseModel


def dump_models(items: Iterable[BaseModel]) -> str:
    return json.dumps([item.model_dump() for item in items], ensure_ascii=False)


def strip_code_fences(text: str) -> str:
    """Cut the JSON body out of a ```json ... ``` (or bare ```) block."""
    if '```json' in text:
        return text.split('```json', 1)[1].split('```', 1)[0].strip()
    if '```' in text:
        return text.split('```')[1].strip()
    return text.strip()


def parse_json_reply(text: str) -> Any:
    return json.loads(strip_code_fences(text))


def get_provider(base_url: str):
    if 'openrouter' in base_url:
        return 'openrouter'
    if 'openai' in base_url:
        return 'openai'
    if 'localhost' in base_url or '127.0.0.1' in base_url:
        return 'local'
    raise ValueError(
        f"Unable to determine provider from base_url: {base_url!r}. "
        "Expected it to contain 'openrouter', 'openai', or 'localhost'."
    )
