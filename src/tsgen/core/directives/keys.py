# src/tsgen/core/directives/keys.py
"""Chaves de diretivas reconhecidas pelo tsgen."""

# Controla se a geração TypeScript está habilitada. Subpacotes herdam o valor.
# Aceita "enabled" ou "disabled". Default: "enabled".
TYPESCRIPT_GENERATION = "ts_generation"

# Dependências ignoradas nos targets gerados (lista separada por vírgula).
IGNORE_DEPENDENCIES = "ts_ignore_dependencies"

# Controla se os imports TypeScript devem ser validados. Default: true.
# Pode ser declarada no máximo uma vez por pacote.
VALIDATE_IMPORT_STATEMENTS = "ts_validate_import_statements"

# Ambiente de execução (node, browser, other); afeta os imports nativos disponíveis.
ENVIRONMENT = "ts_environment"

# Convenção de nome do target ts_project. Interpola $package_name$ com o nome
# do pacote: com `foo` e `$package_name$_my_lib`, o nome é `foo_my_lib`.
LIBRARY_NAMING_CONVENTION = "ts_project_naming_convention"

# Convenção de nome do target de teste; mesma interpolação de
# ts_project_naming_convention.
TEST_NAMING_CONVENTION = "ts_test_naming_convention"

# Diretiva padrão de exclusão (glob).
EXCLUDE = "exclude"

KNOWN_DIRECTIVES = frozenset(
    {
        TYPESCRIPT_GENERATION,
        IGNORE_DEPENDENCIES,
        VALIDATE_IMPORT_STATEMENTS,
        ENVIRONMENT,
        LIBRARY_NAMING_CONVENTION,
        TEST_NAMING_CONVENTION,
        EXCLUDE,
    }
)

# Diretivas que não podem ser repetidas dentro do mesmo pacote.
SINGLE_VALUED_DIRECTIVES = frozenset({VALIDATE_IMPORT_STATEMENTS})
