# src/tsgen/core/config/errors.py
"""
Exceções canônicas da camada de configuração do tsgen.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a construção da árvore de configuração, a aplicação de diretivas e o
carregamento de manifests de diretivas.

As exceções aqui definidas representam **violações estruturais
explícitas**, e não erros genéricos de execução.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Toda exceção pode ser convertida em `ErrorPayload` serializável

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa "dependência não resolvida" (isso não é erro)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos no GenerationContext
"""

from __future__ import annotations

from typing import Any, Optional

from tsgen.core import errors as payloads
from tsgen.core.errors import ErrorPayload


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do tsgen.

    Todas as exceções levantadas durante a construção da árvore,
    aplicação de diretivas e carregamento de manifests devem herdar
    desta classe.

    Limites explícitos:
        - Não representa dependência de terceiros não resolvida
        - Não representa erro do emissor de declarações de build
    """

    def to_payload(self) -> ErrorPayload:
        return payloads.config_load_error(
            message=str(self) or "Erro de configuração",
            details={"exception_class": self.__class__.__name__},
        )


# ---------------------------------------------------------------------------
# Árvore de configuração
# ---------------------------------------------------------------------------

class TreeOrderingViolation(ConfigError):
    """
    Exceção levantada quando o pacote pai não existe na árvore no momento
    em que um pacote filho é derivado.

    Indica que o walker externo visitou um pacote antes do seu pai,
    violando a ordem raiz → folha exigida pela árvore.

    Limites explícitos:
        - Não tenta criar o pacote pai automaticamente
    """

    def __init__(self, package: str, expected_parent: str) -> None:
        super().__init__(
            f"Pacote pai '{expected_parent}' não encontrado para o pacote '{package}'"
        )
        self.package = package
        self.expected_parent = expected_parent

    def to_payload(self) -> ErrorPayload:
        return payloads.tree_ordering_violation(
            package=self.package,
            expected_parent=self.expected_parent,
        )


class DuplicatePackageError(ConfigError):
    """Exceção levantada quando o mesmo pacote é registrado duas vezes na árvore."""

    def __init__(self, package: str) -> None:
        super().__init__(f"Pacote já registrado na árvore: '{package}'")
        self.package = package

    def to_payload(self) -> ErrorPayload:
        return payloads.duplicate_package(package=self.package)


# ---------------------------------------------------------------------------
# Diretivas
# ---------------------------------------------------------------------------

class DirectiveError(ConfigError):
    """
    Exceção base para diretivas inválidas em um pacote.

    Carrega o pacote, a chave da diretiva e o valor bruto recebido,
    permitindo diagnóstico direto do ponto de correção.
    """

    def __init__(
        self,
        message: str,
        *,
        package: str,
        directive: str,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.package = package
        self.directive = directive
        self.value = value


class UnknownDirectiveError(DirectiveError):
    """Exceção levantada quando a chave da diretiva não é suportada."""

    def __init__(self, *, package: str, directive: str, value: Any = None) -> None:
        super().__init__(
            f"Diretiva desconhecida '{directive}' no pacote '{package}'",
            package=package,
            directive=directive,
            value=value,
        )

    def to_payload(self) -> ErrorPayload:
        return payloads.unknown_directive(package=self.package, directive=self.directive)


class InvalidDirectiveValueError(DirectiveError):
    """
    Exceção levantada quando o valor de uma diretiva não pode ser interpretado.

    Exemplo:
        - `ts_generation maybe` (aceita apenas `enabled` / `disabled`)
    """

    def __init__(
        self,
        *,
        package: str,
        directive: str,
        value: Any,
        expected: Optional[str] = None,
    ) -> None:
        suffix = f" (esperado: {expected})" if expected else ""
        super().__init__(
            f"Valor inválido {value!r} para diretiva '{directive}' no pacote '{package}'{suffix}",
            package=package,
            directive=directive,
            value=value,
        )
        self.expected = expected

    def to_payload(self) -> ErrorPayload:
        return payloads.invalid_directive_value(
            package=self.package,
            directive=self.directive,
            value=self.value,
            expected=self.expected,
        )


class DuplicateDirectiveError(DirectiveError):
    """
    Exceção levantada quando uma diretiva de valor único é declarada mais
    de uma vez no mesmo pacote.

    Decisões arquiteturais:
        - A detecção é responsabilidade da camada de diretivas, não do ConfigNode
        - Redeclarar em um subpacote é um override legítimo, não uma duplicidade
    """

    def __init__(self, *, package: str, directive: str, value: Any = None) -> None:
        super().__init__(
            f"Diretiva '{directive}' declarada mais de uma vez no pacote '{package}'",
            package=package,
            directive=directive,
            value=value,
        )

    def to_payload(self) -> ErrorPayload:
        return payloads.duplicate_directive(package=self.package, directive=self.directive)


# ---------------------------------------------------------------------------
# Manifests de diretivas
# ---------------------------------------------------------------------------

class DirectivesFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o manifest base de diretivas não é encontrado.

    O manifest local (overrides) é opcional e nunca levanta esta exceção.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do manifest não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando a estrutura do manifest não respeita o shape esperado.

    Exemplos:
        - conteúdo raiz que não é um dicionário
        - `packages` que não é um mapa
        - lista de diretivas de um pacote que não é uma lista
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge
    entre o manifest base e o manifest local.

    Exemplo de conflito:
        - base:     {"packages": {"a": [...]}}
        - override: {"packages": "a"}
    """
