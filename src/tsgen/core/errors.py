"""
tsgen — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do tsgen.
Erros de configuração são considerados artefatos da run de geração e fazem
parte do contrato operacional do sistema, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do tsgen.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - decision_required: indica se a geração está bloqueada aguardando decisão humana
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Árvore de configuração
TREE_ORDERING_VIOLATION = "TREE_ORDERING_VIOLATION"
DUPLICATE_PACKAGE = "DUPLICATE_PACKAGE"

# Diretivas
UNKNOWN_DIRECTIVE = "UNKNOWN_DIRECTIVE"
INVALID_DIRECTIVE_VALUE = "INVALID_DIRECTIVE_VALUE"
DUPLICATE_DIRECTIVE = "DUPLICATE_DIRECTIVE"

# Carregamento de manifests de diretivas
CONFIG_LOAD_ERROR = "CONFIG_LOAD_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def tree_ordering_violation(
    *,
    package: str,
    expected_parent: str,
    hint: str = "Visite os pacotes da raiz para as folhas: o pacote pai deve ser registrado antes de qualquer filho.",
) -> ErrorPayload:
    return ErrorPayload(
        type=TREE_ORDERING_VIOLATION,
        message="Pacote visitado antes do seu pacote pai",
        details={
            "package": package,
            "expected_parent": expected_parent,
        },
        hint=hint,
        decision_required=False,
    )


def duplicate_package(
    *,
    package: str,
    hint: str = "Cada pacote deve ser visitado exatamente uma vez por run de geração.",
) -> ErrorPayload:
    return ErrorPayload(
        type=DUPLICATE_PACKAGE,
        message="Pacote registrado mais de uma vez na árvore de configuração",
        details={"package": package},
        hint=hint,
        decision_required=False,
    )


def unknown_directive(
    *,
    package: str,
    directive: str,
    hint: str = "Remova a diretiva ou corrija o nome para uma das diretivas suportadas.",
) -> ErrorPayload:
    return ErrorPayload(
        type=UNKNOWN_DIRECTIVE,
        message="Diretiva desconhecida",
        details={
            "package": package,
            "directive": directive,
        },
        hint=hint,
        decision_required=False,
    )


def invalid_directive_value(
    *,
    package: str,
    directive: str,
    value: Any,
    expected: Optional[str] = None,
    hint: str = "Ajuste o valor da diretiva para um dos valores aceitos.",
) -> ErrorPayload:
    return ErrorPayload(
        type=INVALID_DIRECTIVE_VALUE,
        message="Valor inválido para diretiva",
        details={
            "package": package,
            "directive": directive,
            "value": value,
            "expected": expected,
        },
        hint=hint,
        decision_required=False,
    )


def duplicate_directive(
    *,
    package: str,
    directive: str,
    hint: str = "Declare a diretiva uma única vez por pacote; subpacotes podem sobrescrevê-la.",
) -> ErrorPayload:
    return ErrorPayload(
        type=DUPLICATE_DIRECTIVE,
        message="Diretiva declarada mais de uma vez no mesmo pacote",
        details={
            "package": package,
            "directive": directive,
        },
        hint=hint,
        decision_required=True,
    )


def config_load_error(
    *,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise o arquivo de diretivas (formato, caminho e estrutura raiz) antes de reexecutar.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_LOAD_ERROR,
        message=message,
        details=details or {},
        hint=hint,
        decision_required=False,
    )
