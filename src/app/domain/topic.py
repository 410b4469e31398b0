"""Resolução do tópico de destino a partir do path da requisição.

Para uma URL como https://relay.example.com/{topic}, o primeiro segmento
do path é o nome do tópico, usado literalmente (sem decode ou allow-list).
"""

from __future__ import annotations


def resolve_topic(request_path: str) -> str | None:
    """Deriva o tópico do primeiro segmento do path.

    Remove exatamente uma barra inicial e uma final (não recursivo) e
    usa o primeiro segmento resultante.

    Args:
        request_path: Path original da requisição (ex: "/orders/extra/")

    Returns:
        Nome do tópico, ou None se o primeiro segmento for vazio.

    Exemplos:
        >>> resolve_topic("/foo/bar/")
        'foo'
        >>> resolve_topic("/") is None
        True
    """
    path = request_path.removeprefix("/").removesuffix("/")
    topic = path.split("/", 1)[0]
    return topic or None
