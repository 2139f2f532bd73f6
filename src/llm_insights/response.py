from typing import Literal
from openai import AsyncOpenAI
from pydantic import BaseModel


def first_choice_content(completion, model_name: str) -> str:
    # error bodies from some providers arrive with status 200 and no choices
    choices = getattr(completion, "choices", None)
    job = choices[0].message.content if choices else None
    if job is None:
        raise RuntimeError(
            f"Completion returned no result for model {model_name!r}. "
            "This typically indicates an empty API response "
            "or a parsing/formatting issue."
        )
    return job


async def get_so_completion(
    log: list,
    model_name: str,
    client: AsyncOpenAI,
    pydantic_model: type[BaseModel],
    provider_name: Literal['openai', 'openrouter', 'local'],
) -> str:
    """Structured completion; returns the raw JSON text of the reply."""
    if provider_name not in ('openai', 'openrouter', 'local'):
        raise ValueError(
            f"Unsupported provider_name: {provider_name!r}. "
            "Supported providers are: 'openai', 'openrouter', 'local'."
        )
    completion = await client.chat.completions.create(
        model=model_name,
        messages=log,
        response_format={
            "type": "json_schema",
            "json_schema": {
                "name": pydantic_model.__name__,
                "schema": pydantic_model.model_json_schema(by_alias=True),
            }
        },
        temperature=0.0
    )
    return first_choice_content(completion, model_name)
