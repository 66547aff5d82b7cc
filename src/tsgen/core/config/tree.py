# src/tsgen/core/config/tree.py
"""
Árvore de configuração por pacote do tsgen.

Este módulo define a `ConfigTree`, o mapa de path de pacote → `ConfigNode`
de uma run de geração, e a operação de busca do nó pai de um pacote.

Normalização de paths:
    - separador POSIX, sem barra final
    - a raiz é representada pela string vazia
    - "." e "./" são equivalentes à raiz

Decisões arquiteturais:
    - A árvore é um objeto explícito de uma run (sem estado global)
    - A inserção é responsabilidade do walker, imediatamente após a derivação
    - Registro duplicado de um pacote é tratado como erro estrutural

Invariantes:
    - Cada path normalizado possui no máximo um nó
    - O pai de um pacote é o nó registrado em `dirname(path)`

Limites explícitos:
    - Não deriva nós filhos
    - Não decide ordem de travessia
    - Não aplica diretivas
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .errors import DuplicatePackageError, TreeOrderingViolation
from .node import ConfigNode

ROOT_PACKAGE = ""


def normalize_package_path(path: str) -> str:
    """Normaliza um path de pacote; a raiz vira `""`."""
    cleaned = path.replace("\\", "/").strip()
    if not cleaned:
        return ROOT_PACKAGE
    normalized = posixpath.normpath(cleaned).strip("/")
    if normalized == ".":
        return ROOT_PACKAGE
    return normalized


def parent_package_path(path: str) -> str:
    """`dirname` do pacote, com o sentinela "." convertido para a raiz."""
    directory = posixpath.dirname(normalize_package_path(path))
    if directory == ".":
        directory = ROOT_PACKAGE
    return directory


@dataclass
class ConfigTree:
    """
    Mapa de pacotes para seus nós de configuração.

    Decisões arquiteturais:
        - Ordem de inserção é irrelevante para a busca
        - A busca do pai não tem efeitos colaterais
        - `parent_for_package` retorna `None` em caso de ausência;
          `require_parent_for_package` torna a ausência um erro explícito
    """

    _nodes: Dict[str, ConfigNode] = field(default_factory=dict, init=False, repr=False)

    def register(self, path: str, node: ConfigNode) -> None:
        key = normalize_package_path(path)
        if key in self._nodes:
            raise DuplicatePackageError(key)
        self._nodes[key] = node

    def get(self, path: str) -> Optional[ConfigNode]:
        return self._nodes.get(normalize_package_path(path))

    def __getitem__(self, path: str) -> ConfigNode:
        return self._nodes[normalize_package_path(path)]

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_package_path(path) in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def packages(self) -> List[str]:
        return sorted(self._nodes)

    def root(self) -> Optional[ConfigNode]:
        return self._nodes.get(ROOT_PACKAGE)

    def parent_for_package(self, path: str) -> Optional[ConfigNode]:
        """
        Retorna o nó pai do pacote ou `None`.

        A raiz não possui pai. Para os demais pacotes, `None` indica que o
        pai ainda não foi registrado (árvore construída fora de ordem).
        """
        if normalize_package_path(path) == ROOT_PACKAGE:
            return None
        return self._nodes.get(parent_package_path(path))

    def require_parent_for_package(self, path: str) -> ConfigNode:
        """
        Retorna o nó pai do pacote ou levanta `TreeOrderingViolation`.

        Raises:
            TreeOrderingViolation: se o pai não está registrado, ou se o
                pacote é a própria raiz (que não possui pai).
        """
        package = normalize_package_path(path)
        parent = self.parent_for_package(package)
        if parent is None:
            raise TreeOrderingViolation(package, parent_package_path(package))
        return parent
