# src/tsgen/core/config/__init__.py
"""
Camada de configuração do tsgen (motor de herança).

Este pacote contém a árvore de configuração por pacote e as regras de
herança, override e merge de cada setting de geração.

Componentes principais:
    - node    → `ConfigNode`, settings de um pacote e sua política de herança
    - tree    → `ConfigTree`, mapa path → nó e busca do pai
    - naming  → renderização de templates com `$package_name$`
    - types   → `EnvironmentType`
    - resolver→ capacidade injetável de resolução de terceiros
    - hashing → identidade estrutural de um snapshot de pacote
    - errors  → hierarquia de exceções `ConfigError`

Princípios fundamentais:
    - Nenhuma operação realiza I/O
    - A forma da árvore é imposta externamente (walker)
    - Conflitos e violações de ordem são erros explícitos

Limites explícitos:
    - Não descobre diretivas
    - Não lê manifests nem arquivos de fonte
    - Não decide ordem de travessia
"""

from .errors import (
    ConfigError,
    DirectiveError,
    DuplicateDirectiveError,
    DuplicatePackageError,
    InvalidDirectiveValueError,
    TreeOrderingViolation,
    UnknownDirectiveError,
)
from .naming import PACKAGE_NAME_PLACEHOLDER, render_naming_convention
from .node import ConfigNode
from .resolver import NullThirdPartyResolver, ThirdPartyResolver
from .tree import ROOT_PACKAGE, ConfigTree, normalize_package_path, parent_package_path
from .types import EnvironmentType

__all__ = [
    "ConfigError",
    "ConfigNode",
    "ConfigTree",
    "DirectiveError",
    "DuplicateDirectiveError",
    "DuplicatePackageError",
    "EnvironmentType",
    "InvalidDirectiveValueError",
    "NullThirdPartyResolver",
    "PACKAGE_NAME_PLACEHOLDER",
    "ROOT_PACKAGE",
    "ThirdPartyResolver",
    "TreeOrderingViolation",
    "UnknownDirectiveError",
    "normalize_package_path",
    "parent_package_path",
    "render_naming_convention",
]
