# src/tsgen/core/walk/__init__.py
"""
Travessia de referência da árvore de pacotes.

Componentes:
    - planner → ordem determinística raiz → folhas
    - walker  → construção da ConfigTree e aplicação de diretivas
"""

from .planner import plan_packages
from .walker import build_config_tree

__all__ = ["build_config_tree", "plan_packages"]
