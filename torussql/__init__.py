"""
TorusSQL - SQL to bytecode compiler

TorusSQL compiles SQL statements into a compact bytecode intended for
the TorusSQL virtual machine.

Example:
    import torussql

    bytecode = torussql.compile_sql('CREATE DATABASE "MyDB";')
    print(bytecode.hex())  # 0101044d794442
"""

from torussql.compiler import (
    compile_sql,
    compile_file,
    Bytecode,
    CompileOptions,
    LanguageType,
    TorusSQLError,
)

__version__ = "0.1.0"
__author__ = "TorusSQL Team"

__all__ = [
    # Compiler
    'compile_sql',
    'compile_file',
    'Bytecode',
    'CompileOptions',
    'LanguageType',

    # Errors
    'TorusSQLError',
]


def version() -> str:
    """Get TorusSQL version string."""
    return __version__
