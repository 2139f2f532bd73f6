"""Static catalogs fixed at build time.

Survey definitions, the built-in resource library, the coaching-session guide
and the field observation checklist. Responses only store the survey id; the
title and category are looked up here when a response is read back.
"""
# app/services/catalog.py
from src.app.schemas.catalog import (
    ChecklistItem,
    ChecklistSection,
    GuideQuestion,
    QuestionDefinition,
    ResourceDefinition,
    ScaleLabels,
    SurveyDefinition,
)

UNKNOWN_SURVEY_TITLE = "Desconhecido"
UNKNOWN_SURVEY_CATEGORY = "geral"

SCALE_FREQ = ScaleLabels(start="Nunca", end="Sempre")
SCALE_SATISF = ScaleLabels(start="Muito Insatisfeito", end="Muito Satisfeito")
SCALE_AGREE = ScaleLabels(start="Discordo Totalmente", end="Concordo Totalmente")
SCALE_QUALITY = ScaleLabels(start="Muito Ruim", end="Excelente")
SCALE_MOOD = ScaleLabels(start="Muito Baixo/Cansado", end="Excelente/Energizado")


def _scale(qid: str, text: str, labels: ScaleLabels, category: str) -> QuestionDefinition:
    return QuestionDefinition(id=qid, text=text, type="scale", scale_labels=labels, category=category)


def _text(qid: str, text: str, category: str) -> QuestionDefinition:
    return QuestionDefinition(id=qid, text=text, type="text", category=category)


SURVEYS: list[SurveyDefinition] = [
    SurveyDefinition(
        id="F-leadership",
        title="F) Liderança e Suporte Gerencial",
        description="Avalie a qualidade da liderança e o suporte oferecido pela sua chefia direta.",
        category="org",
        estimated_time="5 min",
        questions=[
            _scale("f1", "1. O meu gestor direto trata-me com respeito e dignidade.", SCALE_AGREE, "org"),
            _scale("f2", "2. O meu gestor fornece feedback útil e regular sobre o meu trabalho.", SCALE_FREQ, "org"),
            _scale("f3", "3. Sinto que o meu gestor se preocupa genuinamente com o meu bem-estar pessoal.", SCALE_AGREE, "org"),
            _scale("f4", "4. O meu gestor comunica as metas e expectativas de forma clara.", SCALE_AGREE, "org"),
            _scale("f5", "5. Sinto-me confortável para pedir ajuda ao meu gestor quando tenho dificuldades.", SCALE_AGREE, "org"),
            _scale("f6", "6. O meu gestor reconhece o meu bom desempenho e as minhas conquistas.", SCALE_FREQ, "org"),
            _scale("f7", "7. O meu gestor está aberto a receber sugestões e opiniões da equipe.", SCALE_AGREE, "org"),
            _scale("f8", "8. O meu gestor ajuda a remover obstáculos que atrapalham o meu trabalho.", SCALE_FREQ, "org"),
            _text("f9", "Espaço para sugestões ou observações ao seu gestor:", "org"),
        ],
    ),
    SurveyDefinition(
        id="D-org-practices",
        title="D) Gestão e Práticas Organizacionais",
        description="Avaliação da capacidade da empresa de promover o bem-estar no local de trabalho.",
        category="org",
        estimated_time="10 min",
        questions=[
            _scale("d1", "1) A minha carga de trabalho é gerenciável e favorável à execução do trabalho.", SCALE_AGREE, "org"),
            _scale("d2", "2) A empresa valoriza e promove a conciliação saudável entre a vida pessoal e profissional.", SCALE_AGREE, "org"),
            _scale("d3", "3) Os meus esforços e contribuições são reconhecidos e valorizados pela empresa.", SCALE_AGREE, "org"),
            _scale("d4", "4) Tenho a autonomia necessária para tomar decisões e tenho liberdade para exercer as minhas funções.", SCALE_AGREE, "org"),
            _scale("d5", "5) A empresa oferece oportunidades suficientes de crescimento profissional e aprendizagem.", SCALE_AGREE, "org"),
            _scale("d6", "6) Em geral, sinto que o ambiente de trabalho é saudável e de baixo/moderado stress.", SCALE_AGREE, "org"),
            _scale("d7", "7) A temperatura, iluminação e ventilação do local de trabalho é adequada e confortável.", SCALE_AGREE, "org"),
            _scale("d8", "8) Os equipamentos de trabalho e o mobiliário são confortáveis e permitem manter uma boa postura.", SCALE_AGREE, "org"),
            _scale("d9", "9) O nível de ruído no local de trabalho não interfere com a minha concentração.", SCALE_AGREE, "org"),
            _scale("d10", "10) As condições de higiene são adequadas (limpeza, banheiros, copa).", SCALE_AGREE, "org"),
            _scale("d11", "11) A empresa incentiva pausas para movimentação durante o horário de trabalho.", SCALE_AGREE, "org"),
            _scale("d12", "12) A empresa oferece/incentiva opções de alimentação saudável.", SCALE_AGREE, "org"),
            _scale("d14", "13) A empresa valoriza a diversidade e inclusão.", SCALE_AGREE, "org"),
            _scale("d15", "14) A comunicação interna é clara, aberta e transparente.", SCALE_AGREE, "org"),
            _scale("d16", "15) Os relacionamentos entre colegas são positivos e saudáveis.", SCALE_AGREE, "org"),
            _scale("d19", "16) Sinto-me confortável em falar da minha saúde/sentimentos com o RH ou gestão.", SCALE_AGREE, "org"),
            _text("d22", "Comentários Adicionais ou Sugestões para a Organização:", "org"),
        ],
    ),
    SurveyDefinition(
        id="B-physical-wellbeing",
        title="B) Saúde e Bem-estar Físico",
        description="Avaliação da saúde física, ergonomia e nível de energia corporal.",
        category="physical",
        estimated_time="5 min",
        questions=[
            _scale("b1", "1. Sinto-me fisicamente confortável e sem dores corporais (costas, pescoço, pulsos) durante a jornada.", SCALE_AGREE, "physical"),
            _scale("b2", "2. O meu posto de trabalho e equipamentos permitem-me manter uma postura correta e saudável.", SCALE_AGREE, "physical"),
            _scale("b3", "3. Consigo realizar pausas ativas (levantar, alongar) regularmente durante o dia.", SCALE_FREQ, "physical"),
            _scale("b4", "4. Sinto que a minha visão descansa adequadamente e não tenho fadiga visual excessiva.", SCALE_AGREE, "physical"),
            _scale("b5", "5. Consigo manter uma hidratação e alimentação adequadas durante o horário de trabalho.", SCALE_FREQ, "physical"),
            _scale("b6", "6. As condições ambientais (iluminação, temperatura, ruído) favorecem o meu conforto físico.", SCALE_AGREE, "physical"),
            _scale("b7", "7. Chego ao final do dia com energia física suficiente (sem exaustão extrema).", SCALE_AGREE, "physical"),
            _scale("b8", "8. Sinto que o meu ambiente de trabalho é seguro e higienizado.", SCALE_AGREE, "physical"),
            _text("b9", "Espaço para relatar desconfortos físicos específicos ou necessidades ergonômicas:", "physical"),
        ],
    ),
    SurveyDefinition(
        id="C-social-wellbeing",
        title="C) Bem-estar Social",
        description="Avaliação da inclusão, relacionamentos e cultura de equipe.",
        category="social",
        estimated_time="8 min",
        questions=[
            _scale("c1", "1. Sinto que pertenço e sou valorizado(a) na minha equipe.", SCALE_AGREE, "social"),
            _scale("c2", "2. Sinto-me apoiado(a) pelos meus colegas quando preciso de ajuda.", SCALE_AGREE, "social"),
            _scale("c3", "3. Como avaliaria o nível de colaboração no seu departamento?", SCALE_QUALITY, "social"),
            _scale("c4", "4. Tenho relacionamentos construtivos e respeitosos com meus colegas.", SCALE_AGREE, "social"),
            _scale("c5", "5. Tenho oportunidades de interagir socialmente com colegas (almoços, cafés, eventos).", SCALE_FREQ, "social"),
            _scale("c7", "6. Sinto-me ouvido(a) quando expresso minhas opiniões em reuniões.", SCALE_FREQ, "social"),
            _scale("c8", "7. A liderança demonstra empatia pelas situações pessoais dos colaboradores.", SCALE_AGREE, "social"),
            _scale("c9", "8. No geral, como classificaria o clima social da empresa?", SCALE_QUALITY, "social"),
            _text("c10", "Sugestões para melhorar a integração e o clima social:", "social"),
        ],
    ),
    SurveyDefinition(
        id="A-mental-wellbeing",
        title="A) Saúde e Bem-estar Mental",
        description="Diagnóstico de stress, ansiedade e satisfação mental.",
        category="mental",
        estimated_time="9 min",
        questions=[
            _scale("a1", "1. Com que frequência sente ansiedade ou nervosismo por causa do trabalho?", SCALE_FREQ, "mental"),
            _scale("a2", "2. Sinto-me sobrecarregado(a) com o volume de tarefas/metas.", SCALE_FREQ, "mental"),
            _scale("a3", "3. Tenho autonomia suficiente para decidir como executar meu trabalho.", SCALE_AGREE, "mental"),
            _scale("a4", "4. Sinto segurança psicológica para admitir erros sem medo de punição.", SCALE_AGREE, "mental"),
            _scale("a5", "5. Estou satisfeito(a) com o reconhecimento que recebo.", SCALE_SATISF, "mental"),
            _scale("a6", "6. Vejo oportunidades claras de crescimento e aprendizado na empresa.", SCALE_AGREE, "mental"),
            _scale("a7", "7. Consigo \"desligar\" do trabalho quando estou em casa/folga.", SCALE_FREQ, "mental"),
            _scale("a8", "8. Como classificaria o ambiente de trabalho em termos de positividade?",
                   ScaleLabels(start="Tóxico", end="Muito Positivo"), "mental"),
            _scale("a10", "9. No geral, como classificaria sua saúde mental atual?", SCALE_QUALITY, "mental"),
            _text("a11", "Sugestões para reduzir o estresse e melhorar a saúde mental:", "mental"),
        ],
    ),
    SurveyDefinition(
        id="E-work-preferences",
        title="E) Satisfação com Modelo de Trabalho",
        description="Avaliação do alinhamento entre suas preferências e o modelo atual.",
        category="preferences",
        estimated_time="5 min",
        questions=[
            _scale("e1", "1. Estou satisfeito com meu horário de trabalho atual.", SCALE_SATISF, "preferences"),
            _scale("e2", "2. Estou satisfeito com o modelo (presencial/híbrido/remoto) atual.", SCALE_SATISF, "preferences"),
            _scale("e3", "3. As ferramentas de comunicação utilizadas são eficientes.", SCALE_AGREE, "preferences"),
            _scale("e4", "4. O ambiente físico permite que eu me concentre adequadamente.", SCALE_AGREE, "preferences"),
            _scale("e5", "5. Tenho o nível de autonomia que desejo para minhas tarefas.", SCALE_AGREE, "preferences"),
            _scale("e6", "6. Estou satisfeito com a frequência de feedbacks que recebo.", SCALE_SATISF, "preferences"),
            _scale("e7", "7. Sinto que minhas preferências de desenvolvimento profissional são atendidas.", SCALE_AGREE, "preferences"),
            _text("e8", "Quais seriam suas preferências ideais (Horário/Modelo/Ferramentas)?", "preferences"),
        ],
    ),
    SurveyDefinition(
        id="G-checkin",
        title="G) Acompanhamento Contínuo (Check-in de Clima)",
        description="Check-in rápido semanal para medir humor e energia da equipe.",
        category="mental",
        estimated_time="2 min",
        questions=[
            _scale("g1", "1. Termômetro de Humor: Como você classificaria seu estado de ânimo hoje?", SCALE_MOOD, "mental"),
            _scale("g2", "2. Nível de Energia: Sinto-me com energia para realizar minhas tarefas.", SCALE_AGREE, "mental"),
            _scale("g3", "3. Fluxo de Trabalho: Senti que meu trabalho fluiu bem esta semana.", SCALE_AGREE, "mental"),
            _scale("g4", "4. Apoio: Senti-me apoiado(a) pela minha equipe/gestão nos últimos dias.", SCALE_AGREE, "mental"),
            _text("g5", "Tem algum obstáculo (\"bloqueio\") ou vitória recente que gostaria de compartilhar?", "mental"),
        ],
    ),
    SurveyDefinition(
        id="H-financial",
        title="H) Bem-estar Financeiro",
        description="Avaliação sobre como a vida financeira impacta o seu bem-estar.",
        category="org",
        estimated_time="5 min",
        questions=[
            _scale("h1", "1. Sinto-me seguro(a) em relação à minha situação financeira atual.", SCALE_AGREE, "org"),
            _scale("h2", "2. Minhas preocupações financeiras afetam meu foco no trabalho.", SCALE_FREQ, "org"),
            _scale("h3", "3. Tenho capacidade de lidar com despesas inesperadas (emergências).", SCALE_AGREE, "org"),
            _scale("h4", "4. Estou satisfeito(a) com os benefícios (ex: plano saúde, vale) da empresa.", SCALE_SATISF, "org"),
            _scale("h5", "5. Acredito que minha remuneração é justa em relação ao mercado.", SCALE_AGREE, "org"),
            _text("h6", "Sugestões de benefícios ou suporte financeiro que a empresa poderia oferecer:", "org"),
        ],
    ),
    SurveyDefinition(
        id="I-dei",
        title="I) Diversidade, Equidade e Inclusão",
        description="Avaliação do ambiente de respeito e igualdade.",
        category="social",
        estimated_time="6 min",
        questions=[
            _scale("i1", "1. Sinto que posso ser eu mesmo(a) no trabalho sem receio de julgamento.", SCALE_AGREE, "social"),
            _scale("i2", "2. A empresa valoriza e respeita pessoas de diferentes origens e identidades.", SCALE_AGREE, "social"),
            _scale("i3", "3. Acredito que as oportunidades de promoção são justas para todos.", SCALE_AGREE, "social"),
            _scale("i4", "4. Sinto-me seguro(a) para reportar discriminação se ela ocorrer.", SCALE_AGREE, "social"),
            _scale("i5", "5. A liderança demonstra compromisso real com a inclusão.", SCALE_AGREE, "social"),
            _text("i6", "Sugestões para tornar a empresa mais inclusiva:", "social"),
        ],
    ),
]

_SURVEYS_BY_ID = {survey.id: survey for survey in SURVEYS}


def get_survey(survey_id: str) -> SurveyDefinition | None:
    return _SURVEYS_BY_ID.get(survey_id)


def survey_title(survey_id: str) -> str:
    survey = get_survey(survey_id)
    return survey.title if survey else UNKNOWN_SURVEY_TITLE


def survey_category(survey_id: str) -> str:
    survey = get_survey(survey_id)
    return survey.category if survey else UNKNOWN_SURVEY_CATEGORY


def question_text(survey_id: str, question_id: str) -> str:
    """Question wording for export and report rows, the id when unknown."""
    survey = get_survey(survey_id)
    if not survey:
        return question_id
    return survey.question_text(question_id)


RESOURCES_LIBRARY: list[ResourceDefinition] = [
    ResourceDefinition(
        id="res_m1", title="Técnica de Respiração 4-7-8", type="guide", category="mental", duration="5 min", thumbnail="🌬️",
        content=(
            "**O que é:**\nUma técnica simples de respiração para acalmar o sistema nervoso rapidamente, "
            "ideal para momentos de alta ansiedade ou antes de dormir.\n\n**Como fazer:**\n"
            "1. **Inspire** pelo nariz silenciosamente contando até 4.\n"
            "2. **Segure** a respiração contando até 7.\n"
            "3. **Expire** pela boca fazendo um som de \"sopro\" contando até 8.\n\n"
            "Repita este ciclo por 4 vezes.\n\n**Dica:** Mantenha a ponta da língua no céu da boca, "
            "logo atrás dos dentes da frente, durante todo o exercício."
        ),
    ),
    ResourceDefinition(
        id="res_m2", title="Mindfulness: Escaneamento Corporal", type="guide", category="mental", duration="10 min", thumbnail="🧘",
        content=(
            "**O que é:**\nUma prática de atenção plena onde você foca a atenção em diferentes partes do corpo, "
            "notando tensões sem julgamento.\n\n**Benefícios:**\n* Reduz o stress físico e mental.\n"
            "* Melhora a consciência corporal.\n* Ajuda a adormecer.\n\n**Prática:**\n"
            "Comece pelos dedos dos pés e vá subindo lentamente (tornozelos, pernas, joelhos...) até o topo da cabeça. "
            "Apenas observe: está quente? Frio? Tenso? Relaxado?"
        ),
    ),
    ResourceDefinition(
        id="res_m3", title="Detox Digital no Trabalho", type="article", category="mental", duration="4 min leitura", thumbnail="📵",
        content=(
            "**Sinais que você precisa de um detox:**\n* Checa o e-mail compulsivamente.\n"
            "* Sente \"vibrações fantasmas\" no bolso.\n* Dificuldade de concentração por mais de 15 minutos.\n\n"
            "**Estratégias:**\n1. **Blocos de Foco:** Trabalhe 50min com celular em modo avião.\n"
            "2. **Sem Telas no Almoço:** Use esse tempo para saborear a comida e conversar.\n"
            "3. **Notificações:** Desative todas as notificações não essenciais (redes sociais, apps de compras)."
        ),
    ),
    ResourceDefinition(
        id="res_p1", title="Alongamentos de Mesa (Desk Yoga)", type="video", category="physical", duration="8 min", thumbnail="🪑",
        content=(
            "**Sequência Rápida para Alívio:**\n\n"
            "1. **Pescoço:** Incline a cabeça para a direita, segure 15s. Repita para a esquerda.\n"
            "2. **Ombros:** Gire os ombros para trás 10 vezes lentamente.\n"
            "3. **Coluna:** Sentado, gire o tronco para a direita segurando no encosto da cadeira. Repita para o outro lado.\n"
            "4. **Punhos:** Estique o braço à frente e puxe os dedos para trás suavemente.\n\n"
            "**Faça isso a cada 2 horas!**"
        ),
    ),
    ResourceDefinition(
        id="res_p2", title="Regra 20-20-20 para Olhos", type="guide", category="physical", duration="2 min", thumbnail="👁️",
        content=(
            "**Combata a Fadiga Visual Digital:**\n\nA cada **20 minutos** olhando para uma tela...\n"
            "Olhe para algo a **20 pés (6 metros)** de distância...\nPor pelo menos **20 segundos**.\n\n"
            "Isso relaxa o músculo ciliar do olho e previne dores de cabeça e visão turva."
        ),
    ),
    ResourceDefinition(
        id="res_p3", title="Checklist de Ergonomia", type="guide", category="ergonomics", duration="5 min", thumbnail="📏",
        content=(
            "**Configure sua estação:**\n\n* **Monitor:** O topo da tela deve estar na altura dos olhos.\n"
            "* **Cotovelos:** Devem formar um ângulo de 90º ao digitar.\n"
            "* **Pés:** Apoiados totalmente no chão ou em um apoio.\n"
            "* **Lombar:** Use uma cadeira com suporte lombar ou uma almofada pequena.\n"
            "* **Iluminação:** Evite reflexos na tela (luz vindo de trás ou de cima, não diretamente na frente)."
        ),
    ),
    ResourceDefinition(
        id="res_n1", title="Lanches Energéticos vs. Picos de Açúcar", type="article", category="nutrition", duration="3 min leitura", thumbnail="🍎",
        content=(
            "**Evite:** Bolachas, refrigerantes, doces. Eles dão energia rápida, mas causam um \"crash\" "
            "(queda brusca) logo depois, gerando sono e fome.\n\n**Prefira:**\n"
            "* **Nozes e Castanhas:** Gorduras boas para o cérebro.\n* **Iogurte Natural:** Proteína.\n"
            "* **Fruta com Aveia:** Fibras que liberam energia lentamente.\n"
            "* **Chocolate Amargo (70%+):** Rico em antioxidantes e pouco açúcar."
        ),
    ),
    ResourceDefinition(
        id="res_n2", title="Hidratação e Cognição", type="article", category="nutrition", duration="2 min leitura", thumbnail="💧",
        content=(
            "Você sabia que apenas 2% de desidratação já reduz a atenção, memória e tempo de reação?\n\n"
            "**Dica:** Mantenha uma garrafa de água na mesa. Se sentir sede, você já está desidratado. "
            "A cor da urina deve ser amarelo claro, quase transparente."
        ),
    ),
]


SESSION_GUIDE: list[GuideQuestion] = [
    GuideQuestion(id="discuss_1", section="Discussão",
                  text="1. Para começar, gostaria de saber como você tem se sentido. Há algo específico que tem estado na sua mente?"),
    GuideQuestion(id="discuss_2", section="Discussão",
                  text="2. Que tipo de desafios tem enfrentado no seu trabalho? Houve algum acontecimento da sua vida pessoal que impactou a forma como se tem sentido no trabalho?"),
    GuideQuestion(id="discuss_3", section="Discussão",
                  text="3. Que aspectos do seu ambiente de trabalho considera favoráveis e desfavoráveis ao seu bem-estar?"),
    GuideQuestion(id="discuss_4", section="Discussão",
                  text="4. Sente-se à vontade para entrar em contacto com o seu supervisor ou o departamento de RH se precisar de apoio?"),
    GuideQuestion(id="resources_1", section="Recursos",
                  text="1. Conhece/tem acesso às iniciativas e recursos de bem-estar que oferecemos? Acha que são úteis?"),
    GuideQuestion(id="resources_2", section="Recursos",
                  text="2. Existem outras iniciativas ou recursos de bem-estar que gostaria de ver implementados?"),
    GuideQuestion(id="plan_1", section="Plano de Ação",
                  text="1. Que objetivos podemos estabelecer juntos para ajudá-lo?"),
    GuideQuestion(id="plan_2", section="Plano de Ação",
                  text="2. Que áreas específicas do seu bem-estar gostaria de melhorar com o apoio da empresa?"),
]


def session_guide(custom_questions: list[str]) -> list[GuideQuestion]:
    """Fixed guide followed by the owner's custom questions as `custom_{n}`."""
    custom = [
        GuideQuestion(id=f"custom_{idx}", section="Questões Personalizadas", text=text)
        for idx, text in enumerate(custom_questions)
    ]
    return SESSION_GUIDE + custom


CHECKLIST_SCALE = [
    "Não cumpre",
    "Cumpre pouco/mal",
    "Cumpre",
    "Cumpre muito/bem",
    "Cumpre totalmente",
    "Não aplicável",
]

OBSERVATION_CHECKLIST: list[ChecklistSection] = [
    ChecklistSection(id="a", title="A. Ambiente físico", items=[
        ChecklistItem(id="a1", question="As cadeiras e mesas de trabalho são confortáveis e ajustáveis."),
        ChecklistItem(id="a2", question="A iluminação é adequada, evitando áreas com sombras ou ofuscamento."),
        ChecklistItem(id="a3", question="A temperatura e ventilação do ambiente são confortáveis."),
        ChecklistItem(id="a4", question="O nível de ruído no local de trabalho é aceitável e não interfere na concentração."),
    ]),
    ChecklistSection(id="b", title="B. Ambiente psicossocial", items=[
        ChecklistItem(id="b1", question="As relações entre os colaboradores são cordiais e colaborativas."),
        ChecklistItem(id="b2", question="Existe frequente comunicação entre colegas de trabalho."),
        ChecklistItem(id="b3", question="Existe frequente comunicação entre colegas e gestores."),
        ChecklistItem(id="b4", question="Não ocorrem desacordos/disputas frequentes."),
    ]),
    ChecklistSection(id="c", title="C. Carga de Trabalho e Autonomia", items=[
        ChecklistItem(id="c1", question="Os colaboradores aparentam gerir bem a sua carga de trabalho."),
        ChecklistItem(id="c2", question="Os colaboradores tomam decisões relacionadas com as suas funções."),
        ChecklistItem(id="c3", question="Os colaboradores fazem pausas regulares."),
    ]),
    ChecklistSection(id="d", title="D. Reconhecimento e Feedback", items=[
        ChecklistItem(id="d1", question="Os gestores/supervisores dão feedback regular e construtivo sobre o desempenho."),
        ChecklistItem(id="d2", question="Os colegas reconhecem e apreciam os esforços e conquistas uns dos outros."),
    ]),
    ChecklistSection(id="e", title="E. Bem-estar emocional", items=[
        ChecklistItem(id="e1", question="Os colaboradores têm uma postura relaxada, sem sinais de stress ou ansiedade."),
        ChecklistItem(id="e2", question="As expressões faciais dos colaboradores transmitem positividade."),
    ]),
]
