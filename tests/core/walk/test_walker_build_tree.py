# tests/core/walk/test_walker_build_tree.py
"""
Testes do walker de referência (construção da ConfigTree).

Este módulo valida a construção da árvore de configuração de uma run
a partir de diretivas por pacote, exercendo o motor de herança de ponta
a ponta.

Os testes asseguram que:
- todo pacote (e seus ancestrais) recebe exatamente um nó
- cada nó é derivado do nó do pacote pai
- diretivas são aplicadas ao pacote correto e herdadas pelos subpacotes
- erros de diretiva são registrados no contexto e re-levantados (fail-fast)

Limites explícitos:
    - Não valida filesystem
    - Não valida emissão de declarações de build
"""

from pathlib import Path

import pytest

try:
    from tsgen.core.config.errors import (
        DuplicateDirectiveError,
        InvalidConfigRootTypeError,
        UnknownDirectiveError,
    )
    from tsgen.core.config.hashing import compute_config_hash
    from tsgen.core.config.types import EnvironmentType
    from tsgen.core.directives.loader import load_directives
    from tsgen.core.walk.walker import build_config_tree
except Exception as e:  # noqa: BLE001
    build_config_tree = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing tree walker. Implement:"
            "- src/tsgen/core/walk/walker.py (build_config_tree)"
            f"Import error: {_IMPORT_ERR}"
        )


def test_build_tree_creates_node_per_package(gen_ctx):
    _require_imports()
    tree = build_config_tree(gen_ctx, {"a/b": [], "c": []})

    assert tree is gen_ctx.tree
    assert tree.packages() == ["", "a", "a/b", "c"]
    assert tree[""].is_root()
    assert tree["a"].parent() is tree[""]
    assert tree["a/b"].parent() is tree["a"]
    assert tree["c"].parent() is tree[""]
    assert tree[""].repo_root() == gen_ctx.repo_root


def test_end_to_end_ignore_scenario(gen_ctx):
    """
    Cenário ponta a ponta: raiz → "a" → "a/b", com `left-pad` ignorado em "a".
    """
    _require_imports()
    tree = build_config_tree(
        gen_ctx,
        {"a": [{"ts_ignore_dependencies": "left-pad"}], "a/b": []},
    )
    assert tree["a/b"].is_dependency_ignored("left-pad") is True
    assert tree[""].is_dependency_ignored("left-pad") is False


def test_directives_inherited_by_subpackages(gen_ctx):
    _require_imports()
    tree = build_config_tree(
        gen_ctx,
        {
            "": ["exclude dist/**"],
            "libs": [{"ts_environment": "browser"}, {"ts_project_naming_convention": "$package_name$_lib"}],
            "libs/ui": [{"ts_generation": "disabled"}],
            "apps/server": [],
        },
    )

    ui = tree["libs/ui"]
    assert ui.environment_type() is EnvironmentType.BROWSER
    assert ui.render_library_name("ui") == "ui_lib"
    assert ui.generation_enabled() is False
    assert tree["libs"].generation_enabled() is True

    server = tree["apps/server"]
    assert server.environment_type() is EnvironmentType.OTHER
    assert server.render_library_name("server") == "server"
    assert list(server.excluded_patterns()) == ["dist/**"]


def test_excluded_patterns_policy_is_explicit(gen_ctx):
    _require_imports()
    tree = build_config_tree(
        gen_ctx,
        {"": ["exclude dist/**"], "a": ["exclude **/*.spec.ts"]},
        share_excluded_patterns=False,
    )
    assert list(tree[""].excluded_patterns()) == ["dist/**"]
    assert list(tree["a"].excluded_patterns()) == ["dist/**", "**/*.spec.ts"]


def test_excluded_patterns_shared_by_default(gen_ctx):
    _require_imports()
    tree = build_config_tree(gen_ctx, {"a": ["exclude **/*.spec.ts"]})
    assert list(tree[""].excluded_patterns()) == ["**/*.spec.ts"]


def test_resolver_injected_into_every_node(gen_ctx):
    _require_imports()

    class _Resolver:
        def find(self, node, module_name):
            return f"//third_party:{module_name}", True

    tree = build_config_tree(gen_ctx, {"a/b": []}, resolver=_Resolver())
    assert tree["a/b"].find_third_party_dependency("react") == ("//third_party:react", True)


def test_events_logged_per_package(gen_ctx):
    _require_imports()
    build_config_tree(gen_ctx, {"a": [{"ts_environment": "node"}]})

    configured = [ev for ev in gen_ctx.events if ev["message"] == "package configured"]
    assert [ev["package"] for ev in configured] == ["", "a"]
    applied = [ev for ev in gen_ctx.events if ev["message"] == "directive applied"]
    assert len(applied) == 1
    assert applied[0]["package"] == "a"


def test_configured_event_carries_config_hash(gen_ctx):
    _require_imports()
    tree = build_config_tree(gen_ctx, {"a": [{"ts_generation": "disabled"}], "b": []})

    configured = {ev["package"]: ev for ev in gen_ctx.events if ev["message"] == "package configured"}
    for package in ("", "a", "b"):
        assert configured[package]["config_hash"] == compute_config_hash(tree[package].snapshot())
        assert len(configured[package]["config_hash"]) == 64

    assert configured["b"]["config_hash"] == configured[""]["config_hash"]
    assert configured["a"]["config_hash"] != configured[""]["config_hash"]


def test_equivalent_package_paths_are_merged(gen_ctx):
    """
    `"a"` e `"./a"` designam o mesmo pacote: as entradas de ambos são aplicadas.
    """
    _require_imports()
    tree = build_config_tree(
        gen_ctx,
        {
            "a": ["ts_ignore_dependencies x"],
            "./a": ["ts_ignore_dependencies y"],
            "b/": None,
        },
    )
    assert tree["a"].ignored_dependencies() == frozenset({"x", "y"})
    assert tree.packages() == ["", "a", "b"]


@pytest.mark.parametrize("entries", ["ts_generation disabled", {"ts_generation": "disabled"}, 3])
def test_non_list_package_entries_raise(gen_ctx, entries):
    _require_imports()
    with pytest.raises(InvalidConfigRootTypeError):
        build_config_tree(gen_ctx, {"a": entries})
    assert len(gen_ctx.tree) == 0


def test_unknown_directive_is_recorded_and_raised(gen_ctx):
    """
    Verifica o comportamento fail-fast do walker.

    Decisões arquiteturais:
        - O erro é registrado como evento ERROR com payload serializável
        - O erro é re-levantado; nenhum pacote posterior é visitado
    """
    _require_imports()
    with pytest.raises(UnknownDirectiveError):
        build_config_tree(gen_ctx, {"a": ["ts_bogus 1"], "b": []})

    ev = gen_ctx.events[-1]
    assert ev["level"] == "ERROR"
    assert ev["package"] == "a"
    assert ev["error"]["type"] == "UNKNOWN_DIRECTIVE"
    assert "b" not in gen_ctx.tree


def test_duplicate_validation_directive_in_package_raises(gen_ctx):
    _require_imports()
    with pytest.raises(DuplicateDirectiveError):
        build_config_tree(
            gen_ctx,
            {
                "a": [
                    {"ts_validate_import_statements": "false"},
                    {"ts_validate_import_statements": "true"},
                ]
            },
        )


def test_build_from_loaded_manifest(tmp_path: Path, gen_ctx, directives_defaults_yaml, directives_local_yaml):
    _require_imports()
    defaults = tmp_path / "directives.yaml"
    local = tmp_path / "directives.local.yaml"
    defaults.write_text(directives_defaults_yaml, encoding="utf-8")
    local.write_text(directives_local_yaml, encoding="utf-8")

    tree = build_config_tree(
        gen_ctx,
        load_directives(defaults_path=str(defaults), local_path=str(local)),
    )

    assert tree.packages() == ["", "apps", "apps/server", "libs", "libs/ui"]
    server = tree["apps/server"]
    assert server.environment_type() is EnvironmentType.NODE
    assert server.validate_import_statements() is False
    assert server.is_dependency_ignored("left-pad")

    ui = tree["libs/ui"]
    assert ui.generation_enabled() is False
    assert ui.environment_type() is EnvironmentType.OTHER
    assert list(ui.excluded_patterns()) == ["**/*.stories.ts"]
