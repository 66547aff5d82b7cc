# src/tsgen/core/directives/apply.py
"""
Aplicação de diretivas sobre nós de configuração.

Este módulo traduz pares chave/valor de diretivas em chamadas aos
mutators do `ConfigNode` de um pacote, interpretando e validando os
valores de cada diretiva.

Responsabilidades do módulo:
    - Interpretar entradas de diretiva (mapa `{chave: valor}` ou string `"chave valor"`)
    - Validar valores (booleanos, enabled/disabled, ambientes)
    - Detectar diretivas de valor único repetidas no mesmo pacote
    - Registrar cada diretiva aplicada no GenerationContext

Decisões arquiteturais:
    - Diretivas desconhecidas são erro explícito, não são ignoradas
    - Repetir `ts_validate_import_statements` no mesmo pacote é erro;
      redeclarar em um subpacote é override legítimo
    - Template de nome sem `$package_name$` é aceito com warning

Limites explícitos:
    - Não descobre diretivas em arquivos de fonte
    - Não decide ordem de travessia
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Tuple

from tsgen.core.config.errors import (
    DuplicateDirectiveError,
    InvalidDirectiveValueError,
    UnknownDirectiveError,
)
from tsgen.core.config.naming import PACKAGE_NAME_PLACEHOLDER, has_placeholder
from tsgen.core.config.node import ConfigNode
from tsgen.core.config.types import EnvironmentType
from tsgen.core.context import GenerationContext

from . import keys

_TRUE_LITERALS = {"1", "t", "true"}
_FALSE_LITERALS = {"0", "f", "false"}

Directive = Tuple[str, Any]

# Diretivas de valor único → "já definida neste pacote?"
_SET_LOCALLY: Dict[str, Callable[[ConfigNode], bool]] = {
    keys.VALIDATE_IMPORT_STATEMENTS: ConfigNode.validate_import_statements_set_locally,
}


def parse_directive_entry(package: str, entry: Any) -> Directive:
    """
    Converte uma entrada de manifest em `(chave, valor)`.

    Formatos aceitos:
        - `{"ts_generation": "disabled"}` (mapa com exatamente uma chave)
        - `"ts_generation disabled"` (forma de comentário gazelle)
    """
    if isinstance(entry, dict):
        if len(entry) != 1:
            raise InvalidDirectiveValueError(
                package=package,
                directive="<entry>",
                value=entry,
                expected="mapa com exatamente uma chave",
            )
        (key, value), = entry.items()
        return str(key).strip(), value

    if isinstance(entry, str):
        parts = entry.strip().split(None, 1)
        if not parts:
            raise InvalidDirectiveValueError(
                package=package,
                directive="<entry>",
                value=entry,
                expected="'chave valor'",
            )
        key = parts[0]
        value = parts[1].strip() if len(parts) > 1 else ""
        return key, value

    raise InvalidDirectiveValueError(
        package=package,
        directive="<entry>",
        value=entry,
        expected="mapa {chave: valor} ou string 'chave valor'",
    )


def _parse_bool(package: str, directive: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    literal = str(value).strip().lower()
    if literal in _TRUE_LITERALS:
        return True
    if literal in _FALSE_LITERALS:
        return False
    raise InvalidDirectiveValueError(
        package=package,
        directive=directive,
        value=value,
        expected="true | false",
    )


def _parse_enabled(package: str, directive: str, value: Any) -> bool:
    literal = str(value).strip().lower()
    if literal == "enabled":
        return True
    if literal == "disabled":
        return False
    raise InvalidDirectiveValueError(
        package=package,
        directive=directive,
        value=value,
        expected="enabled | disabled",
    )


def _parse_environment(package: str, directive: str, value: Any) -> EnvironmentType:
    try:
        return EnvironmentType(str(value).strip().lower())
    except ValueError:
        raise InvalidDirectiveValueError(
            package=package,
            directive=directive,
            value=value,
            expected=" | ".join(e.value for e in EnvironmentType),
        ) from None


def _parse_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = [str(v) for v in value if v is not None]
    else:
        items = str(value).split(",")
    return [item.strip() for item in items if item.strip()]


def _parse_template(package: str, directive: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidDirectiveValueError(
            package=package,
            directive=directive,
            value=value,
            expected=f"template não vazio (ex.: {PACKAGE_NAME_PLACEHOLDER}_lib)",
        )
    return value.strip()


def apply_directive(
    ctx: GenerationContext,
    package: str,
    node: ConfigNode,
    key: str,
    value: Any,
) -> None:
    """
    Aplica uma diretiva ao nó do pacote.

    Raises:
        UnknownDirectiveError: chave não suportada.
        InvalidDirectiveValueError: valor não interpretável.
        DuplicateDirectiveError: diretiva de valor único repetida no pacote.
    """
    if key not in keys.KNOWN_DIRECTIVES:
        raise UnknownDirectiveError(package=package, directive=key, value=value)

    if key in keys.SINGLE_VALUED_DIRECTIVES and _SET_LOCALLY[key](node):
        raise DuplicateDirectiveError(package=package, directive=key, value=value)

    if key == keys.TYPESCRIPT_GENERATION:
        node.set_generation_enabled(_parse_enabled(package, key, value))

    elif key == keys.IGNORE_DEPENDENCIES:
        for dependency in _parse_list(value):
            node.add_ignored_dependency(dependency)

    elif key == keys.VALIDATE_IMPORT_STATEMENTS:
        node.set_validate_import_statements(_parse_bool(package, key, value))

    elif key == keys.ENVIRONMENT:
        node.set_environment_type(_parse_environment(package, key, value))

    elif key == keys.LIBRARY_NAMING_CONVENTION:
        template = _parse_template(package, key, value)
        _warn_constant_template(ctx, package, key, template)
        node.set_library_naming_convention(template)

    elif key == keys.TEST_NAMING_CONVENTION:
        template = _parse_template(package, key, value)
        _warn_constant_template(ctx, package, key, template)
        node.set_test_naming_convention(template)

    elif key == keys.EXCLUDE:
        pattern = "" if value is None else str(value).strip()
        if not pattern:
            raise InvalidDirectiveValueError(
                package=package,
                directive=key,
                value=value,
                expected="glob não vazio",
            )
        node.add_excluded_pattern(pattern)

    ctx.log(package=package, level="INFO", message="directive applied", directive=key, value=value)


def apply_directives(
    ctx: GenerationContext,
    package: str,
    node: ConfigNode,
    entries: Iterable[Any],
) -> None:
    """Aplica, em ordem, as entradas de diretiva de um pacote."""
    for entry in entries:
        key, value = parse_directive_entry(package, entry)
        apply_directive(ctx, package, node, key, value)


def _warn_constant_template(ctx: GenerationContext, package: str, key: str, template: str) -> None:
    if not has_placeholder(template):
        ctx.add_warning(
            package=package,
            message=f"{key}: template '{template}' não contém {PACKAGE_NAME_PLACEHOLDER}; "
            "todos os pacotes herdeiros terão o mesmo nome de target",
        )
