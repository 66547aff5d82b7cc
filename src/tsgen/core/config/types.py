# src/tsgen/core/config/types.py
"""
Tipos canônicos da camada de configuração do tsgen.

Componentes principais:
    - EnvironmentType → ambiente de execução do código TypeScript do pacote

Invariantes:
    - Enums possuem valores textuais canônicos (serializáveis em JSON)
    - Nenhuma lógica de herança vive neste módulo
"""

from __future__ import annotations

from enum import Enum


class EnvironmentType(str, Enum):
    """
    Ambiente de execução de um pacote.

    O ambiente afeta quais imports nativos estão disponíveis para o
    código do pacote (ex.: módulos built-in do Node).

    Tipos definidos:
        - NODE: código executado em Node.js
        - BROWSER: código executado em navegador
        - OTHER: ambiente não especificado (default)
    """

    NODE = "node"
    BROWSER = "browser"
    OTHER = "other"
