SYSTEM_PROMPT = """
Aja como um especialista sênior em Psicologia Organizacional e Recursos Humanos.
Responda sempre em Português do Brasil.
"""

ANALYSIS_PROMPT = """
Analise os seguintes dados de bem-estar de uma empresa:

KPIs Atuais:
{kpis}

Tendência últimos 6 meses (Mental, Físico, Social):
{trends}

Forneça uma resposta estritamente em formato JSON com a seguinte estrutura:
{{
  "summary": "Um resumo executivo de 2-3 frases.",
  "recommendations": ["Recomendação 1", "Recomendação 2", "Recomendação 3", "Recomendação 4"],
  "riskLevel": "low" | "medium" | "high"
}}

Responda apenas o JSON, sem markdown ou textos adicionais.
"""
