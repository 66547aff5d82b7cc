# src/tsgen/core/directives/__init__.py
"""
Camada de diretivas do tsgen.

Este pacote interpreta diretivas (pares chave/valor por pacote) e as
aplica sobre os nós da árvore de configuração.

Componentes:
    - keys   → chaves de diretivas reconhecidas
    - apply  → interpretação de valores e chamada aos mutators do ConfigNode
    - loader → carregamento de manifests YAML/JSON de diretivas por pacote
    - merge  → deep-merge determinístico entre manifest base e local

Limites explícitos:
    - Não descobre diretivas em comentários de arquivos de build
    - Não decide ordem de travessia
"""

from .apply import apply_directive, apply_directives, parse_directive_entry
from .loader import load_directives

__all__ = ["apply_directive", "apply_directives", "load_directives", "parse_directive_entry"]
