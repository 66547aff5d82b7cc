# src/tsgen/core/walk/walker.py
"""
Walker de referência da árvore de configuração.

Constrói a `ConfigTree` de uma run a partir de um mapa de diretivas por
pacote, exercendo o motor de herança exatamente como o walker externo
de uma run de geração:

    1. planeja a visitação raiz → folhas
    2. cria a raiz ou deriva o filho a partir do nó pai na árvore
    3. registra o nó na árvore antes de aplicar diretivas
    4. aplica as diretivas do pacote
    5. registra um evento estruturado por pacote visitado, com o hash
       canônico dos settings efetivos (`config_hash`)

Decisões arquiteturais:
    - Fail-fast: qualquer `ConfigError` é registrado no contexto e re-levantado
    - Escrita na árvore é sequencial (um único escritor)
    - A política de compartilhamento da lista de exclusões é explícita

Limites explícitos:
    - Não acessa o filesystem
    - Não emite declarações de build
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from tsgen.core.config.errors import ConfigError
from tsgen.core.config.hashing import compute_config_hash
from tsgen.core.config.node import ConfigNode
from tsgen.core.config.resolver import ThirdPartyResolver
from tsgen.core.config.tree import ROOT_PACKAGE, ConfigTree
from tsgen.core.context import GenerationContext
from tsgen.core.directives.apply import apply_directives
from tsgen.core.directives.loader import normalize_package_directives

from .planner import plan_packages


def build_config_tree(
    ctx: GenerationContext,
    package_directives: Mapping[str, List[Any]],
    *,
    resolver: Optional[ThirdPartyResolver] = None,
    share_excluded_patterns: bool = True,
) -> ConfigTree:
    """
    Popula `ctx.tree` com um nó por pacote e aplica as diretivas.

    Args:
        ctx (GenerationContext): Contexto da run (a árvore vive nele).
        package_directives (Mapping[str, List[Any]]): Entradas de diretiva por pacote.
        resolver (Optional[ThirdPartyResolver]): Resolvedor injetado na raiz.
        share_excluded_patterns (bool): Política de derivação da lista de exclusões.

    Returns:
        ConfigTree: A árvore do contexto, populada.

    Raises:
        ConfigError: Qualquer violação estrutural ou de diretiva (fail-fast).
    """
    directives = normalize_package_directives(package_directives)

    for package in plan_packages(directives):
        try:
            if package == ROOT_PACKAGE:
                node = ConfigNode.create(ctx.repo_root, resolver=resolver)
            else:
                parent = ctx.tree.require_parent_for_package(package)
                node = parent.derive_child(share_excluded_patterns=share_excluded_patterns)

            ctx.tree.register(package, node)
            apply_directives(ctx, package, node, directives.get(package, []))

        except ConfigError as e:
            ctx.record_error(package=package, error=e)
            raise

        ctx.log(
            package=package,
            level="INFO",
            message="package configured",
            generation_enabled=node.generation_enabled(),
            config_hash=compute_config_hash(node.snapshot()),
        )

    return ctx.tree
