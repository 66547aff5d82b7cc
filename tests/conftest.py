"""
Fixtures compartilhados para testes do tsgen.

Este módulo define fixtures reutilizáveis que fornecem:
- nós de configuração raiz com defaults
- contexto de run controlado (GenerationContext)
- manifests de diretivas mínimos e determinísticos (YAML)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


# =====================================================
# Motor de herança
# =====================================================

@pytest.fixture
def repo_root() -> str:
    return "/workspace/monorepo"


@pytest.fixture
def root_node(repo_root):
    """
    Nó raiz com todos os defaults.

    Usado por:
        - Testes de derivação e herança de settings
        - Testes de renderização de nomes
    """
    from tsgen.core.config.node import ConfigNode

    return ConfigNode.create(repo_root)


@pytest.fixture
def gen_ctx(repo_root):
    """
    GenerationContext mínimo e determinístico.

    O `run_id` e o `created_at` são fixos para permitir asserts estáveis
    sobre eventos estruturados.
    """
    from tsgen.core.context import GenerationContext

    return GenerationContext(
        run_id="run-test",
        created_at="2026-01-01T00:00:00+00:00",
        repo_root=repo_root,
    )


# =====================================================
# Manifests de diretivas
# =====================================================

@pytest.fixture
def directives_defaults_yaml() -> str:
    """
    Manifest base semelhante ao uso real: raiz + biblioteca de UI + app node.
    """
    return """
packages:
  "":
    - exclude: "**/*.stories.ts"
    - ts_ignore_dependencies: "left-pad"
  libs/ui:
    - ts_environment: browser
    - ts_project_naming_convention: "$package_name$_lib"
  apps/server:
    - ts_environment node
    - ts_validate_import_statements: false
""".lstrip()


@pytest.fixture
def directives_local_yaml() -> str:
    """Override local: desabilita a geração na UI (substitui a lista do pacote)."""
    return """
packages:
  libs/ui:
    - ts_generation: disabled
""".lstrip()
