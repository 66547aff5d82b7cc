# src/tsgen/core/directives/loader.py
"""
Loader de manifests de diretivas do tsgen.

Este módulo carrega, valida estruturalmente e resolve o mapa efetivo
de diretivas por pacote utilizado pelo walker de referência.

O manifest é resolvido a partir de:
    - um manifest base (obrigatório)
    - um manifest local de overrides (opcional)

Formato do documento:

    packages:
      "":
        - ts_generation: enabled
        - exclude: "**/*.spec.ts"
      "libs/ui":
        - ts_environment browser
        - ts_ignore_dependencies: "left-pad, is-odd"

Invariantes:
    - O manifest base é obrigatório
    - O resultado mapeia paths normalizados para listas de entradas
    - Overrides locais nunca mutam o manifest base

Limites explícitos:
    - Não interpreta nem aplica diretivas
    - Não lê arquivos de fonte
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import json

import yaml  # PyYAML

from tsgen.core.config.errors import (
    DirectivesFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from tsgen.core.config.tree import normalize_package_path

from .merge import deep_merge

PACKAGES_KEY = "packages"


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de manifest e valida o tipo raiz.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DirectivesFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DirectivesFileNotFoundError(f"Manifest de diretivas não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
        data = json.loads(text) if text.strip() else None

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Manifest root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _normalize_packages(document: Dict[str, Any]) -> Dict[str, List[Any]]:
    packages = document.get(PACKAGES_KEY)
    if packages is None:
        return {}
    return normalize_package_directives(packages)


def normalize_package_directives(packages: Any) -> Dict[str, List[Any]]:
    """
    Normaliza um mapa `pacote → entradas`.

    Paths equivalentes (`"a"`, `"./a"`, `"a/"`) têm suas entradas
    concatenadas na ordem de declaração. `None` vale como lista vazia.

    Raises:
        InvalidConfigRootTypeError: mapa ou lista de entradas com tipo inválido.
    """
    if not isinstance(packages, Mapping):
        raise InvalidConfigRootTypeError(
            f"'{PACKAGES_KEY}' deve ser dict, recebido: {type(packages).__name__}"
        )

    resolved: Dict[str, List[Any]] = {}
    for raw_path, entries in packages.items():
        path = normalize_package_path("" if raw_path is None else str(raw_path))
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise InvalidConfigRootTypeError(
                f"Diretivas do pacote '{path}' devem ser list, recebido: {type(entries).__name__}"
            )
        resolved.setdefault(path, []).extend(entries)

    return resolved


def load_directives(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, List[Any]]:
    """
    Carrega e resolve o mapa efetivo de diretivas por pacote.

    Política de resolução:
        - O manifest base é obrigatório
        - O manifest local é opcional; quando ausente em disco é ignorado
        - Quando presente, o local tem prioridade: a lista de diretivas de
          um pacote declarado no local substitui a lista do base

    Args:
        defaults_path (str): Caminho para o manifest base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, List[Any]]: Entradas de diretiva por path normalizado.

    Raises:
        DirectivesFileNotFoundError: Se o manifest base não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se a estrutura não respeitar o formato.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    defaults = _load_file(Path(defaults_path))
    effective = {**defaults, PACKAGES_KEY: _normalize_packages(defaults)}

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _load_file(local_file)
            # paths normalizados antes do merge: "./a" e "a" são o mesmo pacote
            local = {**local, PACKAGES_KEY: _normalize_packages(local)}
            effective = deep_merge(effective, local)

    return effective[PACKAGES_KEY]
