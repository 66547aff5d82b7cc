# src/tsgen/core/config/resolver.py
"""
Capacidade injetável de resolução de dependências de terceiros.

Este módulo define o contrato mínimo utilizado pelo `ConfigNode` para
resolver um nome de módulo importado em um target de build concreto
(ex.: a partir de manifests do pacote e de seus ancestrais).

Decisões arquiteturais:
    - A resolução é uma capacidade injetada, não parte do motor de herança
    - O formato de manifest e a ordem de varredura não são definidos aqui
    - "Não encontrado" é um resultado normal, nunca uma exceção

Limites explícitos:
    - Não lê manifests nem arquivos
    - Não altera a árvore de configuração
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from .node import ConfigNode


@runtime_checkable
class ThirdPartyResolver(Protocol):
    """
    Contrato de um resolvedor de dependências de terceiros.

    O resolvedor recebe o `ConfigNode` do pacote consultante, podendo
    percorrer `node.ancestors()` na ordem que o formato de manifest exigir.

    Retorno:
        - (label resolvido, True) quando o módulo é encontrado
        - ("", False) quando não é encontrado
    """

    def find(self, node: "ConfigNode", module_name: str) -> Tuple[str, bool]:
        ...


class NullThirdPartyResolver:
    """Resolvedor default: nunca encontra nenhuma dependência."""

    def find(self, node: "ConfigNode", module_name: str) -> Tuple[str, bool]:
        return "", False
