# src/tsgen/core/context.py
"""
GenerationContext — Contexto canônico de uma run de geração do tsgen.

Este módulo define o **GenerationContext**, o objeto explícito passado
ao walker e à camada de diretivas durante uma run de geração.

O GenerationContext é o **único meio permitido** de:
- acesso à árvore de configuração da run (`ConfigTree`)
- registro de logs estruturados de construção da árvore
- coleta de warnings não fatais associados a pacotes

Princípios fundamentais:
- Isolamento por run (cada run possui seu próprio contexto e sua árvore)
- Nenhum estado global: o contexto é construído uma vez e passado por referência
- Logs são eventos estruturados, não texto livre
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from tsgen.core.config.errors import ConfigError
from tsgen.core.config.tree import ConfigTree


@dataclass
class GenerationContext:
    """
    Contexto compartilhado de uma run de geração.

    Campos canônicos:
    - run_id: identificador único da run
    - created_at: timestamp UTC de criação do contexto
    - repo_root: raiz do workspace
    - tree: árvore de configuração da run
    - meta: metadados livres (ex.: caminhos dos manifests)
    - warnings: warnings por pacote
    - events: log estruturado de eventos
    """

    run_id: str
    created_at: str
    repo_root: str
    tree: ConfigTree = field(default_factory=ConfigTree)
    meta: Dict[str, Any] = field(default_factory=dict)

    warnings: Dict[str, List[str]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def new(cls, repo_root: str, **meta: Any) -> "GenerationContext":
        return cls(
            run_id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc).isoformat(),
            repo_root=repo_root,
            meta=dict(meta),
        )

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, package: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "package": package,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, package: str, message: str) -> None:
        if package not in self.warnings:
            self.warnings[package] = []
        self.warnings[package].append(message)

    def record_error(self, *, package: str, error: ConfigError) -> None:
        payload = error.to_payload()
        self.log(
            package=package,
            level="ERROR",
            message=payload.message,
            error=payload.to_dict(),
        )
