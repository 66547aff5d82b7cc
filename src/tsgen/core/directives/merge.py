# src/tsgen/core/directives/merge.py
"""
Merge do manifest base de diretivas com o manifest local.

Mapas são combinados chave a chave; qualquer outro valor do override
(inclusive a lista de diretivas de um pacote) substitui o da base.
Tipos divergentes na mesma chave são erro. Nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict

from tsgen.core.config.errors import ConfigTypeConflictError


def _type_name(value: Any) -> str:
    return type(value).__name__


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Retorna um novo manifest com `override` aplicado sobre `base`.

    Raises:
        ConfigTypeConflictError: raiz não-dict ou tipos divergentes em uma chave.
    """
    if not (isinstance(base, dict) and isinstance(override, dict)):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: {_type_name(base)} vs {_type_name(override)}"
        )

    merged = deepcopy(base)
    for key, incoming in override.items():
        current = merged.get(key, incoming)
        if isinstance(current, dict) and isinstance(incoming, dict) and key in merged:
            merged[key] = deep_merge(current, incoming)
        elif type(current) is type(incoming):
            merged[key] = deepcopy(incoming)
        else:
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': {_type_name(current)} vs {_type_name(incoming)}"
            )
    return merged
