"""Prompts for each step of paper generation.

Papers are written in Portuguese for students of the PALOP countries, so the
prompt text is Portuguese as well.
"""

from paperforge.models import PAGE_BREAK, GradeBand, PaperRequest, core_pages

OUTLINE_SEPARATOR = ";"

_GRADE_INSTRUCTIONS: dict[GradeBand, str] = {
    GradeBand.LOW: "Qualidade suficiente para uma nota entre 10 e 14 valores: correto, sem excessos.",
    GradeBand.MEDIUM: "Qualidade para uma nota entre 14 e 17 valores: bem estruturado e fundamentado.",
    GradeBand.HIGH: "Qualidade de excelência (17 a 20 valores): análise crítica, rigor e profundidade.",
}


def _level_line(request: PaperRequest) -> str:
    return (
        f"Nível académico: {request.level.value}. A linguagem, profundidade e complexidade "
        f"devem ser estritamente adequadas a este nível."
    )


def build_outline_prompt(request: PaperRequest) -> str:
    count = core_pages(request.pages)
    return f"""\
O aluno precisa de um trabalho de {request.pages} páginas sobre "{request.theme}" ({request.discipline}).
{_level_line(request)}

Liste EXATAMENTE {count} títulos de capítulos para o DESENVOLVIMENTO do trabalho.
NÃO inclua "Introdução", "Conclusão" ou "Referências". Apenas o miolo do trabalho.
Os títulos devem ser académicos e progressivos.

Retorne APENAS a lista de títulos separados por ponto e vírgula ({OUTLINE_SEPARATOR}).
Exemplo: História do tema; Conceitos Fundamentais; Análise de Casos; Impacto Social
"""


def build_intro_prompt(request: PaperRequest) -> str:
    return f"""\
Escreva a INTRODUÇÃO para um trabalho académico sobre "{request.theme}" ({request.discipline}).
{_level_line(request)} Estilo: {request.style.value}.
{_GRADE_INSTRUCTIONS[request.grade]}

Diretrizes:
- O texto deve ocupar APENAS UMA PÁGINA (aprox. 350 a 400 palavras).
- Comece DIRETAMENTE com <h2>1. Introdução</h2>.
- Fale sobre a contextualização, problema, justificativa e objetivos.
- Use <p> para parágrafos. Não use markdown, apenas HTML.
- Use linguagem formal ({request.language.value}).
- Adicione {PAGE_BREAK} no final.
"""


def build_chapter_prompt(request: PaperRequest, number: int, title: str, heading: str) -> str:
    return f"""\
Escreva um capítulo COMPLETO e EXTENSO sobre: "{title}".
Este é o capítulo {number} de um trabalho sobre "{request.theme}" ({request.discipline}).
{_level_line(request)} Estilo: {request.style.value}.
{_GRADE_INSTRUCTIONS[request.grade]}

OBJETIVO: ENCHER UMA PÁGINA INTEIRA (A4).

Diretrizes:
- Comece com <h2>{number}. {heading}</h2>.
- Escreva de forma detalhada e com qualidade académica.
- Adote o ESTILO ACADÉMICO GERAL DOS PALOP.
- Defina conceitos, dê exemplos históricos, cite autores, explore causas e consequências.
- Use linguagem formal ({request.language.value}).
- Mínimo 600 palavras.
- Formato HTML (<p>, <ul>, <blockquote>).
- Adicione {PAGE_BREAK} no final do texto.
"""


def build_conclusion_prompt(request: PaperRequest) -> str:
    return f"""\
Escreva a CONCLUSÃO para o trabalho sobre "{request.theme}" ({request.discipline}).
{_level_line(request)}
{_GRADE_INSTRUCTIONS[request.grade]}

Diretrizes:
- Comece com <h2>Conclusão</h2>.
- O texto deve ocupar APENAS UMA PÁGINA (aprox. 300 a 350 palavras).
- Sintetize os pontos principais abordados nos capítulos anteriores.
- Use linguagem formal ({request.language.value}).
- Formato HTML.
- Adicione {PAGE_BREAK} no final.
"""


def build_references_prompt(request: PaperRequest) -> str:
    return f"""\
Crie uma lista de REFERÊNCIAS BIBLIOGRÁFICAS para o tema "{request.theme}" ({request.discipline}).
Nível académico: {request.level.value}. O tipo de fontes (livros, artigos científicos, etc.) deve ser adequado a este nível.

Diretrizes:
- Retorne APENAS o código HTML das referências. NÃO inclua nenhum texto introdutório ou de conclusão.
- Comece diretamente com <h2>Referências bibliográficas</h2>.
- Gere 10 a 15 referências seguindo as NORMAS GERAIS DOS PALOP.
- Formato HTML (use <ul> e <li> ou <p> com recuo).
- Adicione {PAGE_BREAK} no final.
"""
