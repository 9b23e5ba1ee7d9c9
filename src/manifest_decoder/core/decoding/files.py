# src/manifest_decoder/core/decoding/files.py
"""
Resolução de arquivos candidatos (File Resolver).

Transforma uma especificação de caminho em um conjunto ordenado de
arquivos candidatos:
    - diretório existente → todos os arquivos com extensão reconhecida
    - caminho inexistente → o basename é tratado como *prefixo* de nome de
      arquivo dentro do diretório pai, que precisa existir

Decisões arquiteturais:
    - Cada extensão é buscada independentemente; os resultados são
      concatenados, deduplicados e ordenados pela string do caminho
    - A ordenação garante processamento determinístico em qualquer
      filesystem, independente da ordem de iteração do diretório
    - Um resultado vazio é válido aqui; a decisão de tratá-lo como erro
      pertence ao chamador (`error_on_empty`)

Invariantes:
    - O conjunto retornado nunca contém caminhos duplicados
    - O conjunto retornado está sempre em ordem ascendente
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from manifest_decoder.core.exceptions import (
    NoFilesMatchedError,
    NotADirectoryResolutionError,
    PathNotFoundError,
)

DEFAULT_EXTENSIONS = (".yaml", ".yml", ".json")


def resolve_files(
    path_spec: Union[str, Path],
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    error_on_empty: bool = False,
) -> List[str]:
    """
    Resolve `path_spec` em uma lista ordenada de arquivos candidatos.

    Exemplos:
        `path/to/dir`              → arquivos reconhecidos no diretório
        `path/to/dir/file-prefix-` → arquivos do diretório que começam com
                                     "file-prefix-" (se não for diretório)

    Raises:
        NotADirectoryResolutionError: se `path_spec` for um arquivo regular.
        PathNotFoundError: se o diretório pai de um prefixo não existir.
        NoFilesMatchedError: se nada casar e `error_on_empty` estiver ativo.
    """
    path = Path(path_spec)
    prefix = ""

    if path.exists():
        if not path.is_dir():
            raise NotADirectoryResolutionError(
                f"{path.name!r} is not a directory. not supported",
                details={"path": str(path)},
            )
        directory = path
    else:
        prefix = path.name
        directory = path.parent
        if not directory.is_dir():
            raise PathNotFoundError(
                f"files with prefix {prefix!r} in directory {str(directory)!r} could not be found",
                details={"path": str(path)},
            )

    entries = [entry for entry in directory.iterdir() if entry.is_file()]

    candidates: List[str] = []
    for ext in extensions:
        candidates.extend(
            str(entry) for entry in entries
            if entry.name.startswith(prefix) and entry.name.endswith(ext)
        )

    files = sorted(set(candidates))

    if not files and error_on_empty:
        raise NoFilesMatchedError(
            f"no files found matching {str(path_spec)!r}",
            details={"directory": str(directory), "prefix": prefix},
        )

    return files
