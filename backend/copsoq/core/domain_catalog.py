"""COPSOQ-III questionnaire catalog (plus gambling and indebtedness extensions)."""

from functools import lru_cache

from copsoq.models.catalog import Domain, DomainMeta, Item
from copsoq.models.enums import DomainType, JobLevel

CATALOG_VERSION = "COPSOQ-III+JZ+EF"

# Ordinal response scale, label -> value
RESPONSE_SCALE: dict[str, int] = {
    "Nunca": 0,
    "Raramente": 25,
    "Às vezes": 50,
    "Muitas vezes": 75,
    "Sempre": 100,
}

SCALE_VALUES: frozenset[int] = frozenset(RESPONSE_SCALE.values())

DOMAIN_DEFINITIONS = [
    {
        "id": 1,
        "title": "Grupo 1 - Demandas no Trabalho",
        "name": "Demandas no Trabalho",
        "description": "Avaliação das exigências quantitativas e ritmo de trabalho",
        "type": DomainType.NEGATIVE,
        "items": [
            ("Q1", "Com que frequência você tem muito serviço pra fazer?",
             "Com que frequência você tem um volume elevado de trabalho?"),
            ("Q2", "Com que frequência você não dá conta de terminar tudo que precisa fazer?",
             "Com que frequência você não consegue completar todas as suas tarefas?"),
            ("Q3", "Com que frequência você precisa trabalhar correndo?",
             "Com que frequência você precisa trabalhar em ritmo acelerado?"),
            ("Q4", "Com que frequência seu serviço exige que você faça as coisas muito rápido?",
             "Com que frequência seu trabalho exige que você execute as tarefas com alta velocidade?"),
            ("Q5", "Com que frequência você fica atrasado no serviço?",
             "Com que frequência você fica para trás com suas entregas/trabalho?"),
            ("Q6", "Com que frequência você tem tempo suficiente pra fazer tudo que precisa?",
             "Com que frequência você dispõe de tempo adequado para concluir suas tarefas?", True),
            ("Q7", "Com que frequência seu serviço exige que você fique o tempo todo ligado/antenado?",
             "Com que frequência seu trabalho exige atenção constante?"),
            ("Q8", "Com que frequência o trabalho te deixa emocionalmente acabado?",
             "Com que frequência seu trabalho te deixa emocionalmente esgotado?"),
            ("Q9", "Com que frequência o trabalho te deixa com o corpo moído/cansado?",
             "Com que frequência seu trabalho te deixa fisicamente exaurido?"),
            ("Q10", "Com que frequência você precisa esconder o que está sentindo?",
             "Com que frequência você precisa ocultar seus sentimentos no trabalho?"),
            ("Q11", "Com que frequência você lida com situações que mexem com suas emoções?",
             "Com que frequência você enfrenta situações emocionalmente desafiadoras?"),
        ],
    },
    {
        "id": 2,
        "title": "Grupo 2 - Organização e Conteúdo",
        "name": "Organização e Conteúdo do Trabalho",
        "description": "Influência, desenvolvimento de habilidades e significado do trabalho",
        "type": DomainType.POSITIVE,
        "items": [
            ("Q12", "Você consegue ter alguma palavra sobre quanta coisa te passam pra fazer?",
             "Você pode influenciar a quantidade de trabalho que lhe é atribuída?"),
            ("Q13", "Você consegue decidir o que faz no trabalho?",
             "Você pode influenciar as atividades que realiza no trabalho?"),
            ("Q14", "Você tem liberdade pra decidir como faz o seu serviço?",
             "Você tem influência sobre a forma como executa seu trabalho?"),
            ("Q15", "Seu serviço exige que você tome a frente e faça as coisas acontecerem?",
             "Seu trabalho exige que você tome iniciativa?"),
            ("Q16", "Você consegue usar o que sabe e suas habilidades no dia a dia do trabalho?",
             "Você pode aplicar suas competências e expertise no trabalho?"),
            ("Q17", "Você tem chance de aprender coisas novas e crescer no trabalho?",
             "Você tem oportunidades de desenvolvimento pessoal no trabalho?"),
            ("Q18", "Você acha que o seu trabalho tem sentido/faz diferença?",
             "Você considera seu trabalho significativo?"),
            ("Q19", "Você sente que o que você faz é importante?",
             "Você sente que o trabalho que realiza é importante?"),
        ],
    },
    {
        "id": 3,
        "title": "Grupo 3 - Relações Interpessoais",
        "name": "Relações Sociais e Liderança",
        "description": "Apoio social, feedback e reconhecimento no trabalho",
        "type": DomainType.POSITIVE,
        "items": [
            ("Q20", "Com que frequência os colegas te ajudam e te dão apoio?",
             "Com que frequência você recebe ajuda e suporte dos colegas?"),
            ("Q21", "Com que frequência os colegas param pra te ouvir quando você tem problema no trabalho?",
             "Com que frequência seus colegas estão dispostos a ouvir seus problemas relacionados ao trabalho?"),
            ("Q22", "Com que frequência seu chefe direto te ajuda e te apoia?",
             "Com que frequência você recebe ajuda e suporte do seu superior imediato?"),
            ("Q23", "Seu chefe direto se preocupa se você está satisfeito no trabalho?",
             "Seu superior imediato prioriza a satisfação no trabalho?"),
            ("Q24", "Seu chefe direto é bom em organizar e planejar o serviço?",
             "Seu superior imediato é bom em planejar o trabalho?"),
            ("Q25", "Seu chefe direto é bom em resolver briga/discussão no time?",
             "Seu superior imediato é bom em resolver conflitos?"),
            ("Q26", "Você recebe reconhecimento quando se esforça no trabalho?",
             "Você recebe reconhecimento pelo esforço realizado no trabalho?"),
            ("Q27", "Você recebe retorno/feedback sobre como está indo no trabalho?",
             "Você recebe feedback sobre seu desempenho?"),
            ("Q28", "Seu trabalho é respeitado pelos colegas e chefes?",
             "Seu trabalho é valorizado por colegas e superiores?"),
        ],
    },
    {
        "id": 4,
        "title": "Grupo 4 - Interface Trabalho-Indivíduo",
        "name": "Interface Trabalho-Indivíduo",
        "description": "Insegurança no trabalho e conflito trabalho-família",
        "type": DomainType.NEGATIVE,
        "items": [
            ("Q29", "Você está preocupado em ficar desempregado?",
             "Você está preocupado com a possibilidade de desemprego?"),
            ("Q30", "Você tem medo que mudanças no trabalho piorem sua situação?",
             "Você está preocupado que mudanças organizacionais prejudiquem sua situação profissional?"),
            ("Q31", "Você tem medo de ser transferido pra outro lugar sem querer?",
             "Você está preocupado com a possibilidade de transferência contra sua vontade?"),
            ("Q32", "Depois do trabalho, você ainda tem energia pra ficar com família e amigos?",
             "Você tem energia suficiente para família e amigos no tempo livre?", True),
            ("Q33", "O trabalho toma o tempo que você queria passar com família e amigos?",
             "Seu trabalho consome tempo que gostaria de dedicar à família e amigos?"),
            ("Q34", "Você acha que o trabalho está atrapalhando sua vida pessoal?",
             "Você sente que seu trabalho prejudica sua vida privada?"),
        ],
    },
    {
        "id": 5,
        "title": "Grupo 5 - Valores no Trabalho",
        "name": "Valores Organizacionais",
        "description": "Confiança, justiça e respeito mútuo na organização",
        "type": DomainType.POSITIVE,
        "items": [
            ("Q35", "Os funcionários escondem coisas uns dos outros?",
             "Os colaboradores ocultam informações entre si?", True),
            ("Q36", "Os funcionários escondem coisas da chefia?",
             "Os colaboradores ocultam informações da gestão?", True),
            ("Q37", "A chefia confia que os funcionários vão fazer o serviço direito?",
             "A gestão confia que os colaboradores realizem bem seu trabalho?"),
            ("Q38", "Os funcionários confiam nas informações que vêm da chefia?",
             "Os colaboradores confiam nas informações fornecidas pela gestão?"),
            ("Q39", "Quando rola briga, ela é resolvida de forma justa?",
             "Os conflitos são resolvidos de maneira justa?"),
            ("Q40", "O serviço é dividido de forma justa entre todo mundo?",
             "A distribuição das tarefas é feita de forma justa?"),
            ("Q41", "Quem faz um bom trabalho é valorizado?",
             "Os colaboradores são reconhecidos quando realizam um bom trabalho?"),
            ("Q42", "Todo mundo é tratado do mesmo jeito, de forma justa?",
             "Todos os colaboradores são tratados de forma equitativa?"),
        ],
    },
    {
        "id": 6,
        "title": "Grupo 6 - Personalidade (Opcional)",
        "name": "Traços de Personalidade",
        "description": "Autoeficácia e autoconfiança",
        "type": DomainType.POSITIVE,
        "items": [
            ("Q43", "Eu sempre consigo resolver problemas difíceis se eu me esforçar bastante",
             "Eu consigo resolver problemas difíceis se eu me esforçar o suficiente"),
            ("Q44", "Se alguém me impedir, eu dou um jeito de conseguir o que quero",
             "Se alguém se opuser, consigo encontrar meios de alcançar o que desejo"),
            ("Q45", "É fácil pra mim continuar firme nas minhas metas e conseguir alcançá-las",
             "É fácil para mim manter o foco nas metas e atingir meus objetivos"),
            ("Q46", "Eu me sinto seguro de que consigo lidar bem com coisas inesperadas",
             "Estou confiante de que posso lidar eficientemente com eventos inesperados"),
            ("Q47", "Eu fico calmo quando aparece dificuldade porque confio no que eu sei",
             "Consigo permanecer calmo diante de dificuldades porque confio nas minhas habilidades"),
        ],
    },
    {
        "id": 7,
        "title": "Grupo 7 - Saúde e Bem-Estar",
        "name": "Saúde e Bem-Estar",
        "description": "Avaliação de estresse, burnout e sintomas somáticos",
        "type": DomainType.NEGATIVE,
        "items": [
            ("Q48", "Com que frequência você se sentiu estressado?",
             "Com que frequência você se sentiu estressado?"),
            ("Q49", "Com que frequência você ficou irritado ou muito tenso?",
             "Com que frequência você se sentiu irritável ou tenso?"),
            ("Q50", "Com que frequência você teve dificuldade pra relaxar?",
             "Com que frequência você teve dificuldade para relaxar?"),
            ("Q51", "Com que frequência você se sentiu cansado?",
             "Com que frequência você se sentiu fatigado?"),
            ("Q52", "Com que frequência você teve problema pra dormir?",
             "Com que frequência você apresentou dificuldades para dormir?"),
            ("Q53", "Com que frequência você teve dor de cabeça?",
             "Com que frequência você teve cefaleias?"),
            ("Q54", "Com que frequência você teve dor nos músculos ou no corpo?",
             "Com que frequência você teve dores musculares?"),
            ("Q55", "Com que frequência você sentiu que não aguenta mais?",
             "Com que frequência você sentiu que não consegue continuar?"),
        ],
    },
    {
        "id": 8,
        "title": "Grupo 8 - Comportamentos Ofensivos",
        "name": "Comportamentos Ofensivos",
        "description": "Exposição a assédio e violência no trabalho",
        "type": DomainType.NEGATIVE,
        "items": [
            ("Q56", "Você sofreu assédio sexual no trabalho?",
             "Você foi submetido a assédio sexual no ambiente de trabalho?"),
            ("Q57", "Você sofreu ameaças de violência no trabalho?",
             "Você foi submetido a ameaças de violência no trabalho?"),
            ("Q58", "Você sofreu violência física no trabalho?",
             "Você foi vítima de violência física no trabalho?"),
        ],
    },
    {
        "id": 9,
        "title": "Grupo 9 - Jogos de Apostas",
        "name": "Comportamento de Jogo",
        "description": "Avaliação de comportamentos relacionados a jogos de azar",
        "type": DomainType.NEGATIVE,
        "items": [
            ("Q59", "Você fez apostas em jogos de azar (bet, loteria, jogo do bicho, cassino online etc.)?",
             "Você realizou apostas em jogos de azar (ex.: apostas esportivas, loterias, jogo do bicho, cassinos online)?"),
            ("Q60", "Você sentiu que precisava apostar mais dinheiro pra sentir a mesma emoção?",
             "Você sentiu necessidade de aumentar o valor das apostas para obter a mesma excitação?"),
            ("Q61", "Mesmo perdendo dinheiro, você continuou apostando?",
             "Você persistiu nas apostas mesmo após perdas financeiras?"),
            ("Q62", "Pensar em apostas atrapalhou seu rendimento no trabalho?",
             "Os pensamentos sobre apostas prejudicaram seu desempenho profissional?"),
            ("Q63", "Você escondeu de colegas ou da família quanto dinheiro apostava?",
             "Você ocultou de colegas ou familiares o montante apostado?"),
            ("Q64", "Você usou o celular ou horário de trabalho pra fazer apostas?",
             "Você utilizou tempo de trabalho (celular, intervalos) para realizar apostas?"),
        ],
    },
    {
        "id": 10,
        "title": "Grupo 10 - Endividamento",
        "name": "Endividamento Financeiro",
        "description": "Avaliação do nível de endividamento e estresse financeiro",
        "type": DomainType.NEGATIVE,
        "items": [
            ("Q65", "Você ficou preocupado com dívidas ou contas pra pagar?",
             "Você se sentiu preocupado com dívidas ou pagamento de contas?"),
            ("Q66", "O estresse com dívidas atrapalhou sua concentração no trabalho?",
             "O estresse financeiro afetou sua concentração no trabalho?"),
            ("Q67", "Você deixou de pagar conta de luz, água ou comida por falta de dinheiro?",
             "Você deixou de pagar contas essenciais (água, luz, alimentação) por insuficiência financeira?"),
            ("Q68", "Você precisou pegar empréstimo (banco, agiota ou familiar) pra pagar as contas?",
             "Você precisou contrair empréstimos (bancário, agiota ou familiar) para cobrir despesas?"),
            ("Q69", "Brigas ou conversas sobre dinheiro com família ou colegas estragaram seu humor no trabalho?",
             "Discussões sobre dinheiro com família ou colegas impactaram negativamente seu humor no trabalho?"),
            ("Q70", "Você sente que suas dívidas estão fora de controle?",
             "Você sente que seu nível de endividamento está fora de controle?"),
        ],
    },
]


def _build_item(row: tuple) -> Item:
    item_id, text, management_text, *flags = row
    return Item(
        id=item_id,
        text=text,
        management_text=management_text,
        reversed=bool(flags and flags[0]),
    )


def build_domains(definitions: list[dict]) -> list[Domain]:
    """Build immutable Domain objects from raw definitions.

    Args:
        definitions: List of domain dicts shaped like DOMAIN_DEFINITIONS

    Returns:
        Domains ordered by id

    Raises:
        ValueError: If two definitions share a domain id or an item id
    """
    domains = []
    seen_domains: set[int] = set()
    seen_items: set[str] = set()
    for definition in sorted(definitions, key=lambda d: d["id"]):
        if definition["id"] in seen_domains:
            raise ValueError(f"Duplicate domain id: {definition['id']}")
        seen_domains.add(definition["id"])

        items = tuple(_build_item(row) for row in definition["items"])
        for item in items:
            if item.id in seen_items:
                raise ValueError(f"Duplicate item id: {item.id}")
            seen_items.add(item.id)

        domains.append(
            Domain(
                id=definition["id"],
                title=definition.get("title", definition["name"]),
                name=definition["name"],
                description=definition.get("description", ""),
                type=definition["type"],
                items=items,
            )
        )
    return domains


class DomainCatalog:
    """Read-only collection of questionnaire domains.

    Inject a smaller instance in tests; production code uses get_catalog().
    """

    def __init__(self, domains: list[Domain]):
        self._domains = tuple(sorted(domains, key=lambda d: d.id))
        self._by_id = {d.id: d for d in self._domains}
        self._domain_by_item = {item.id: d for d in self._domains for item in d.items}

    def get_domains(self) -> list[Domain]:
        return list(self._domains)

    def get_domain(self, domain_id: int) -> Domain | None:
        return self._by_id.get(domain_id)

    def find_domain_for_item(self, item_id: str) -> Domain | None:
        return self._domain_by_item.get(item_id)

    def domain_meta(self) -> dict[int, DomainMeta]:
        """Metadata table (id -> name, type) consumed by the results orchestrator."""
        return {d.id: DomainMeta(name=d.name, type=d.type) for d in self._domains}

    def total_items(self) -> int:
        return sum(len(d.items) for d in self._domains)

    def domains_for_level(self, job_level: JobLevel) -> list[dict]:
        """Domains with item wording resolved for the respondent's job level."""
        return [
            {
                "id": d.id,
                "title": d.title,
                "name": d.name,
                "description": d.description,
                "type": d.type,
                "items": [
                    {"id": item.id, "text": item_text(item, job_level)}
                    for item in d.items
                ],
            }
            for d in self._domains
        ]


def item_text(item: Item, job_level: JobLevel) -> str:
    """Return the management wording for management staff when one exists."""
    if job_level == JobLevel.MANAGEMENT and item.management_text:
        return item.management_text
    return item.text


def scale_value(label: str) -> int | None:
    """Map a response label ("Sempre") to its scale value (100)."""
    return RESPONSE_SCALE.get(label)


@lru_cache
def get_catalog() -> DomainCatalog:
    """Get the process-wide default catalog."""
    return DomainCatalog(build_domains(DOMAIN_DEFINITIONS))


def get_domains() -> list[Domain]:
    """Ordered domains of the default catalog."""
    return get_catalog().get_domains()
