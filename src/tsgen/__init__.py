# src/tsgen/__init__.py
"""
tsgen — resolução de configuração de geração de builds TypeScript por pacote.

Para cada diretório da árvore de fontes (pacote), o tsgen resolve os
settings de geração a partir de diretivas descobertas da raiz para as
folhas. Cada pacote pode sobrescrever settings herdados dos ancestrais;
alguns settings são copiados, a lista de exclusões é compartilhada, as
dependências ignoradas são resolvidas pela cadeia de ancestrais e os
nomes de targets são renderizados a partir de templates.

Arquitetura em alto nível:
    - core.config     → motor de herança (ConfigTree, ConfigNode)
    - core.directives → aplicação de diretivas e manifests
    - core.walk       → walker de referência raiz → folhas
    - core.context    → contexto explícito da run
"""

from .core.config import ConfigNode, ConfigTree, EnvironmentType
from .core.context import GenerationContext

__all__ = ["ConfigNode", "ConfigTree", "EnvironmentType", "GenerationContext"]
