# src/tsgen/core/config/node.py
"""
Nó de configuração por pacote do tsgen.

Este módulo define o `ConfigNode`, o conjunto de settings de geração de
um pacote (diretório da árvore de fontes) e a sua política de herança
em relação ao pacote pai.

Política de herança (v1):
    - escalares (geração, ambiente, validação de imports, templates de nome)
      → copiados por valor no momento da derivação
    - repo root → copiado (constante em todo o workspace)
    - padrões excluídos → lista **compartilhada por referência** com o pai
      (default) ou copiada, decisão explícita no momento da derivação
    - dependências ignoradas → conjunto local vazio no filho; a consulta
      percorre a cadeia de ancestrais em tempo de consulta
    - resolvedor de terceiros → a mesma capacidade injetada é compartilhada

Invariantes:
    - Todo nó exceto a raiz possui exatamente um pai, fixado na criação
    - A cadeia de pais é acíclica e finita (limitada pela profundidade do path)
    - Uma dependência ignorada em um ancestral é ignorada em todo descendente
      derivado depois disso, e não pode ser "des-ignorada" localmente

Limites explícitos:
    - Não descobre diretivas
    - Não lê manifests nem arquivos de fonte
    - Não decide ordem de travessia
    - Não detecta diretivas repetidas (responsabilidade da camada de diretivas)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Sequence, Set, Tuple, Union

from .naming import (
    DEFAULT_LIBRARY_NAMING_CONVENTION,
    DEFAULT_TEST_NAMING_CONVENTION,
    render_naming_convention,
)
from .resolver import NullThirdPartyResolver, ThirdPartyResolver
from .types import EnvironmentType


@dataclass(eq=False)
class ConfigNode:
    """
    Conjunto de settings de geração de um pacote.

    Instâncias são criadas apenas via `ConfigNode.create` (raiz) ou
    `ConfigNode.derive_child` (demais pacotes). Os campos são privados:
    leitura e escrita ocorrem pelos métodos de acesso, que aplicam
    normalização (ex.: trim de dependências) e mantêm a política de herança.

    Decisões arquiteturais:
        - A referência ao pai é apenas para consulta, não para ciclo de vida
        - Igualdade é por identidade (um nó por pacote)
        - Nenhum setter propaga valores para filhos já derivados

    Limites explícitos:
        - Não registra a si mesmo na ConfigTree
        - Não executa I/O
    """

    _repo_root: str
    _parent: Optional["ConfigNode"] = field(default=None, repr=False)
    _generation_enabled: bool = True
    _environment_type: EnvironmentType = EnvironmentType.OTHER
    _excluded_patterns: List[str] = field(default_factory=list)
    _shares_excluded_patterns: bool = False
    _ignored_dependencies: Set[str] = field(default_factory=set)
    _validate_import_statements: bool = True
    _validate_import_statements_set: bool = False
    _library_naming_convention: str = DEFAULT_LIBRARY_NAMING_CONVENTION
    _test_naming_convention: str = DEFAULT_TEST_NAMING_CONVENTION
    _resolver: ThirdPartyResolver = field(default_factory=NullThirdPartyResolver, repr=False)

    # -----------------------------
    # Criação e derivação
    # -----------------------------
    @classmethod
    def create(
        cls,
        repo_root: str,
        *,
        resolver: Optional[ThirdPartyResolver] = None,
    ) -> "ConfigNode":
        """
        Cria o nó raiz com todos os defaults.

        Defaults:
            - geração habilitada
            - ambiente `other`
            - lista de exclusões vazia e conjunto de ignorados vazio
            - validação de imports habilitada
            - templates `$package_name$` (lib) e `$package_name$_test` (teste)
            - resolvedor de terceiros que nunca encontra nada
        """
        return cls(
            _repo_root=repo_root,
            _resolver=resolver if resolver is not None else NullThirdPartyResolver(),
        )

    def derive_child(self, *, share_excluded_patterns: bool = True) -> "ConfigNode":
        """
        Cria um nó filho herdando os settings deste nó.

        Escalares são copiados por valor. Com `share_excluded_patterns=True`
        (default) o filho recebe o **mesmo** objeto de lista de exclusões:
        padrões adicionados por qualquer nó que compartilha a lista são
        visíveis para todos eles. Com `False`, o filho recebe uma cópia
        independente tomada agora.

        O conjunto de dependências ignoradas do filho começa vazio; a
        herança acontece em `is_dependency_ignored` via cadeia de pais.
        """
        if share_excluded_patterns:
            excluded = self._excluded_patterns
        else:
            excluded = list(self._excluded_patterns)

        return ConfigNode(
            _repo_root=self._repo_root,
            _parent=self,
            _generation_enabled=self._generation_enabled,
            _environment_type=self._environment_type,
            _excluded_patterns=excluded,
            _shares_excluded_patterns=share_excluded_patterns,
            _ignored_dependencies=set(),
            _validate_import_statements=self._validate_import_statements,
            _validate_import_statements_set=False,
            _library_naming_convention=self._library_naming_convention,
            _test_naming_convention=self._test_naming_convention,
            _resolver=self._resolver,
        )

    # -----------------------------
    # Cadeia de ancestrais
    # -----------------------------
    def parent(self) -> Optional["ConfigNode"]:
        return self._parent

    def is_root(self) -> bool:
        return self._parent is None

    def ancestors(self) -> Iterator["ConfigNode"]:
        """Itera pai, avô, ... até a raiz (o próprio nó não é incluído)."""
        current = self._parent
        while current is not None:
            yield current
            current = current._parent

    def repo_root(self) -> str:
        return self._repo_root

    # -----------------------------
    # Exclusões (lista compartilhada)
    # -----------------------------
    def add_excluded_pattern(self, pattern: str) -> None:
        """Adiciona um glob vindo da diretiva padrão `exclude`."""
        self._excluded_patterns.append(pattern)

    def excluded_patterns(self) -> Sequence[str]:
        """Retorna a lista viva (possivelmente compartilhada); somente leitura para chamadores."""
        return self._excluded_patterns

    def shares_excluded_patterns_with_parent(self) -> bool:
        return self._parent is not None and self._shares_excluded_patterns

    # -----------------------------
    # Geração
    # -----------------------------
    def set_generation_enabled(self, enabled: bool) -> None:
        self._generation_enabled = enabled

    def generation_enabled(self) -> bool:
        return self._generation_enabled

    # -----------------------------
    # Dependências ignoradas
    # -----------------------------
    def add_ignored_dependency(self, dependency: str) -> None:
        """
        Ignora uma dependência neste pacote e, por consequência, em todos
        os subpacotes derivados dele.
        """
        self._ignored_dependencies.add(dependency.strip())

    def ignored_dependencies(self) -> FrozenSet[str]:
        """Conjunto local apenas (sem ancestrais)."""
        return frozenset(self._ignored_dependencies)

    def is_dependency_ignored(self, dependency: str) -> bool:
        """
        Verifica se a dependência é ignorada neste pacote ou em algum
        ancestral até a raiz do workspace.

        A busca começa no conjunto local e sobe pela cadeia de pais;
        retorna na primeira ocorrência.
        """
        trimmed = dependency.strip()

        if trimmed in self._ignored_dependencies:
            return True

        return any(trimmed in ancestor._ignored_dependencies for ancestor in self.ancestors())

    # -----------------------------
    # Validação de imports
    # -----------------------------
    def set_validate_import_statements(self, validate: bool) -> None:
        """
        Define se os imports TypeScript devem ser validados.

        O nó registra que o valor foi definido explicitamente neste pacote,
        permitindo à camada de diretivas detectar declarações repetidas.
        """
        self._validate_import_statements = validate
        self._validate_import_statements_set = True

    def validate_import_statements(self) -> bool:
        """Valor efetivo; `True` quando nunca definido na cadeia."""
        return self._validate_import_statements

    def validate_import_statements_set_locally(self) -> bool:
        return self._validate_import_statements_set

    # -----------------------------
    # Ambiente
    # -----------------------------
    def set_environment_type(self, environment: Union[EnvironmentType, str]) -> None:
        # EnvironmentType(...) levanta ValueError para valores desconhecidos
        self._environment_type = EnvironmentType(environment)

    def environment_type(self) -> EnvironmentType:
        return self._environment_type

    # -----------------------------
    # Convenções de nome
    # -----------------------------
    def set_library_naming_convention(self, template: str) -> None:
        self._library_naming_convention = template

    def library_naming_convention(self) -> str:
        return self._library_naming_convention

    def render_library_name(self, package_name: str) -> str:
        """Nome do target de biblioteca para `package_name`."""
        return render_naming_convention(self._library_naming_convention, package_name)

    def set_test_naming_convention(self, template: str) -> None:
        self._test_naming_convention = template

    def test_naming_convention(self) -> str:
        return self._test_naming_convention

    def render_test_name(self, package_name: str) -> str:
        """Nome do target de teste para `package_name`."""
        return render_naming_convention(self._test_naming_convention, package_name)

    # -----------------------------
    # Dependências de terceiros
    # -----------------------------
    def find_third_party_dependency(self, module_name: str) -> Tuple[str, bool]:
        """
        Resolve um módulo importado em um target de terceiros.

        Delegado ao resolvedor injetado. O default nunca encontra nada e
        retorna `("", False)`; o emissor deve tratar isso como dependência
        não resolvida, não como falha da run.
        """
        return self._resolver.find(self, module_name)

    # -----------------------------
    # Snapshot
    # -----------------------------
    def snapshot(self) -> Dict[str, Any]:
        """
        Visão serializável dos settings efetivos do nó.

        Dependências ignoradas listadas são apenas as locais (ordenadas);
        a herança delas continua sendo resolvida por `is_dependency_ignored`.
        """
        return {
            "repo_root": self._repo_root,
            "generation_enabled": self._generation_enabled,
            "environment": self._environment_type.value,
            "excluded_patterns": list(self._excluded_patterns),
            "ignored_dependencies": sorted(self._ignored_dependencies),
            "validate_import_statements": self._validate_import_statements,
            "library_naming_convention": self._library_naming_convention,
            "test_naming_convention": self._test_naming_convention,
        }
