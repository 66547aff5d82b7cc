# tests/core/directives/test_directives_loader.py
"""
Testes do loader de manifests de diretivas.

Os testes asseguram que:
- a ausência do manifest base é erro explícito
- a ausência do manifest local é aceitável
- YAML e JSON são suportados; outros formatos são rejeitados
- a estrutura raiz e a seção `packages` são validadas
- overrides locais substituem a lista de diretivas de um pacote
- paths de pacotes são normalizados

Limites explícitos:
    - Não valida a aplicação das diretivas
"""

import json
from pathlib import Path

import pytest

try:
    from tsgen.core.config.errors import (
        DirectivesFileNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
    from tsgen.core.directives.loader import load_directives
except Exception as e:  # noqa: BLE001
    load_directives = None
    DirectivesFileNotFoundError = None
    InvalidConfigRootTypeError = None
    UnsupportedConfigFormatError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de diretivas e suas exceções tipadas estejam disponíveis.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing directives loader. Implement:"
            "- src/tsgen/core/directives/loader.py (load_directives)"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(DirectivesFileNotFoundError):
        load_directives(defaults_path=str(tmp_path / "directives.yaml"))


def test_missing_local_is_ok(tmp_path: Path, directives_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "directives.yaml"
    defaults.write_text(directives_defaults_yaml, encoding="utf-8")

    out = load_directives(
        defaults_path=str(defaults),
        local_path=str(tmp_path / "directives.local.yaml"),
    )
    assert set(out) == {"", "libs/ui", "apps/server"}


def test_load_defaults_only(tmp_path: Path, directives_defaults_yaml):
    """
    Verifica o shape resolvido do manifest base: entradas preservadas em
    ordem, mapas de uma chave e strings "chave valor" mantidos como estão.
    """
    _require_imports()
    defaults = tmp_path / "directives.yaml"
    defaults.write_text(directives_defaults_yaml, encoding="utf-8")

    out = load_directives(defaults_path=str(defaults))

    assert out[""] == [{"exclude": "**/*.stories.ts"}, {"ts_ignore_dependencies": "left-pad"}]
    assert out["libs/ui"] == [
        {"ts_environment": "browser"},
        {"ts_project_naming_convention": "$package_name$_lib"},
    ]
    assert out["apps/server"] == [
        "ts_environment node",
        {"ts_validate_import_statements": False},
    ]


def test_load_defaults_and_local(tmp_path: Path, directives_defaults_yaml, directives_local_yaml):
    _require_imports()
    defaults = tmp_path / "directives.yaml"
    local = tmp_path / "directives.local.yaml"
    defaults.write_text(directives_defaults_yaml, encoding="utf-8")
    local.write_text(directives_local_yaml, encoding="utf-8")

    out = load_directives(defaults_path=str(defaults), local_path=str(local))

    assert out["libs/ui"] == [{"ts_generation": "disabled"}]
    assert out["apps/server"][0] == "ts_environment node"


def test_local_paths_are_normalized_before_merge(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "directives.json"
    local = tmp_path / "local.json"
    defaults.write_text(json.dumps({"packages": {"a/": ["exclude x"]}}), encoding="utf-8")
    local.write_text(json.dumps({"packages": {"./a": ["exclude y"]}}), encoding="utf-8")

    out = load_directives(defaults_path=str(defaults), local_path=str(local))
    assert out == {"a": ["exclude y"]}


def test_load_json(tmp_path: Path):
    _require_imports()
    path = tmp_path / "directives.json"
    path.write_text(json.dumps({"packages": {".": [{"ts_environment": "node"}]}}), encoding="utf-8")
    assert load_directives(defaults_path=str(path)) == {"": [{"ts_environment": "node"}]}


@pytest.mark.parametrize("name", ["directives.yaml", "directives.json"])
def test_empty_file_is_empty_manifest(tmp_path: Path, name):
    _require_imports()
    path = tmp_path / name
    path.write_text("", encoding="utf-8")
    assert load_directives(defaults_path=str(path)) == {}


def test_null_package_entries_are_empty(tmp_path: Path):
    _require_imports()
    path = tmp_path / "directives.yaml"
    path.write_text("packages:\n  a:\n", encoding="utf-8")
    assert load_directives(defaults_path=str(path)) == {"a": []}


def test_unsupported_format_raises(tmp_path: Path):
    _require_imports()
    path = tmp_path / "directives.toml"
    path.write_text("packages = {}", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_directives(defaults_path=str(path))


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a\n- list\n",
        "packages:\n  - a\n",
        "packages:\n  a: ts_generation disabled\n",
    ],
)
def test_invalid_structure_raises(tmp_path: Path, content):
    _require_imports()
    path = tmp_path / "directives.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_directives(defaults_path=str(path))
