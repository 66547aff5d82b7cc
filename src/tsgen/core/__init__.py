# src/tsgen/core/__init__.py
"""
Core do tsgen.

Este pacote reúne o motor de herança de configuração por pacote e os
colaboradores de referência que o exercitam.

Componentes principais:
    - config     → ConfigTree, ConfigNode e a política de herança de settings
    - directives → interpretação e aplicação de diretivas, manifests YAML/JSON
    - walk       → planejamento raiz → folhas e construção da árvore
    - context    → GenerationContext (árvore da run, eventos, warnings)
    - errors     → catálogo de payloads de erro serializáveis

Princípios fundamentais:
    - Nenhuma decisão silenciosa: violações são erros explícitos e tipados
    - Nenhum estado global: a árvore pertence ao contexto da run
    - O motor de herança não realiza I/O
"""
