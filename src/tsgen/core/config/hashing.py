# src/tsgen/core/config/hashing.py
"""
Identidade estrutural da configuração efetiva de um pacote.

O walker anexa este hash ao evento "package configured" de cada pacote,
o que permite comparar runs e apontar pacotes cuja configuração mudou.

Invariantes:
    - Snapshots iguais (independente da ordem das chaves) geram o mesmo hash
    - O resultado tem sempre 64 caracteres hexadecimais (SHA-256)

Limites explícitos:
    - Dependências ignoradas herdadas não entram no snapshot
    - O hash não é persistido
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(snapshot: Dict[str, Any]) -> str:
    """
    SHA-256 do JSON canônico (chaves ordenadas, separadores compactos, UTF-8)
    de um `ConfigNode.snapshot()`.

    Raises:
        TypeError: `snapshot` não é um dict.
    """
    if not isinstance(snapshot, dict):
        raise TypeError(f"snapshot deve ser dict, recebido: {type(snapshot).__name__}")

    payload = json.dumps(snapshot, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
