# src/tsgen/core/config/naming.py
"""
Convenções de nomenclatura de targets gerados.

Templates de nome contêm o token `$package_name$`, substituído pelo nome
curto do pacote no momento da renderização. Ex.: com o template
`$package_name$_my_lib` e o pacote `foo`, o nome renderizado é `foo_my_lib`.

Política de renderização (v1):
    - substituição literal de todas as ocorrências do token
    - sem escape e sem outros tokens
    - template sem o token é retornado inalterado
"""

from __future__ import annotations

PACKAGE_NAME_PLACEHOLDER = "$package_name$"

DEFAULT_LIBRARY_NAMING_CONVENTION = PACKAGE_NAME_PLACEHOLDER
DEFAULT_TEST_NAMING_CONVENTION = f"{PACKAGE_NAME_PLACEHOLDER}_test"


def render_naming_convention(template: str, package_name: str) -> str:
    """Substitui todas as ocorrências de `$package_name$` em `template`."""
    return template.replace(PACKAGE_NAME_PLACEHOLDER, package_name)


def has_placeholder(template: str) -> bool:
    return PACKAGE_NAME_PLACEHOLDER in template
