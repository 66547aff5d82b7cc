# src/tsgen/core/walk/planner.py
"""
Planejador de visitação de pacotes (raiz → folhas).

Este módulo produz uma ordem determinística de visitação de pacotes
na qual todo pacote aparece depois do seu pacote pai, exigência da
`ConfigTree` para derivar nós filhos.

Decisões arquiteturais:
    - Diretórios intermediários ausentes são adicionados (um walker real
      visita todos os diretórios da árvore de fontes)
    - A raiz (`""`) está sempre presente
    - Ordenação por profundidade e, em empate, lexicográfica

Invariantes:
    - Nenhum pacote aparece antes do seu pai
    - Cada pacote aparece exatamente uma vez
    - A mesma entrada produz sempre a mesma ordem

Limites explícitos:
    - Não acessa o filesystem
    - Não cria nós de configuração
"""

from __future__ import annotations

from typing import Iterable, List, Set

from tsgen.core.config.tree import ROOT_PACKAGE, normalize_package_path, parent_package_path


def _depth(package: str) -> int:
    return 0 if package == ROOT_PACKAGE else package.count("/") + 1


def plan_packages(paths: Iterable[str]) -> List[str]:
    """
    Ordena pacotes da raiz para as folhas.

    Args:
        paths (Iterable[str]): Paths de pacotes em qualquer ordem/forma.

    Returns:
        List[str]: Paths normalizados, com ancestrais intermediários,
            em ordem de visitação.
    """
    packages: Set[str] = {ROOT_PACKAGE}

    for raw in paths:
        current = normalize_package_path(raw)
        while current not in packages:
            packages.add(current)
            current = parent_package_path(current)

    return sorted(packages, key=lambda p: (_depth(p), p))
