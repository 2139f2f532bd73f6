"""Wellbeing analysis through a chat completion, with offline fallbacks.

`analyze_wellbeing` never raises: a missing key yields the demo payload and
any transport, provider or parsing failure yields an explanatory payload.
"""
import logging
from typing import Sequence

import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, ValidationError

from src.llm_insights.prompts import ANALYSIS_PROMPT, SYSTEM_PROMPT
from src.llm_insights.response import get_so_completion
from src.llm_insights.schemas.analysis import AnalysisReport
from src.llm_insights.utils import dump_models, get_provider, parse_json_reply

logger = logging.getLogger(__name__)

DEMO_REPORT = AnalysisReport(
    summary="Modo de demonstração: configure a OPENAI_API_KEY no arquivo .env para análises reais.",
    recommendations=[
        "Inicie a coleta de feedback via questionários.",
        "Promova sessões de check-in iniciais.",
        "Defina objetivos claros de bem-estar.",
    ],
    risk_level="low",
)

FAILURE_PREFIX = "Não foi possível gerar a análise. "
INVALID_KEY_MESSAGE = "A chave de API fornecida parece inválida."
CONNECTION_MESSAGE = "Erro de conexão com a internet."
GENERIC_MESSAGE = "Verifique se a sua chave de API é válida e se o servidor foi reiniciado."


def failure_report(error: Exception, model_name: str) -> AnalysisReport:
    if isinstance(error, openai.AuthenticationError):
        reason = INVALID_KEY_MESSAGE
    elif isinstance(error, openai.APIConnectionError):
        reason = CONNECTION_MESSAGE
    else:
        reason = GENERIC_MESSAGE
    return AnalysisReport(
        summary=FAILURE_PREFIX + reason,
        recommendations=[
            "Certifique-se de que a chave OPENAI_API_KEY está correta no .env",
            "Reinicie o servidor da aplicação",
            f"Verifique se o modelo {model_name} está disponível para a sua conta.",
        ],
        risk_level="low",
    )


async def analyze_wellbeing(
    client: AsyncOpenAI,
    model_name: str,
    kpis: Sequence[BaseModel],
    trends: Sequence[BaseModel],
    api_key: str | None,
    base_url: str = "https://api.openai.com/v1",
) -> AnalysisReport:
    """Ask the model for a summary, recommendations and a risk level.

    Args:
        client: Async OpenAI-compatible client.
        model_name: Chat model to call.
        kpis: Current KPI cards.
        trends: Monthly series.
        api_key: Configured key; empty means demo mode.
        base_url: Provider endpoint; must name a supported provider.

    Returns:
        AnalysisReport: Parsed report, or a fallback payload.
    """
    if not api_key:
        logger.info("No API key configured, returning demo analysis")
        return DEMO_REPORT

    log = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": ANALYSIS_PROMPT.format(kpis=dump_models(kpis), trends=dump_models(trends))},
    ]
    try:
        text = await get_so_completion(
            log=log,
            model_name=model_name,
            client=client,
            pydantic_model=AnalysisReport,
            provider_name=get_provider(base_url),
        )
        return AnalysisReport.model_validate(parse_json_reply(text))
    except (openai.OpenAIError, ValueError, RuntimeError, ValidationError) as e:
        # json.JSONDecodeError is a ValueError
        logger.warning("Wellbeing analysis failed: %r", e)
        return failure_report(e, model_name)
