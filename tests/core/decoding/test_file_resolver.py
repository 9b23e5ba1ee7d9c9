# tests/core/decoding/test_file_resolver.py
"""
Testes do File Resolver (`resolve_files`).

Este módulo valida que:
- um diretório resolve para todos os arquivos com extensão reconhecida
- um caminho inexistente é tratado como prefixo dentro do diretório pai
- o resultado é deduplicado e ordenado ascendentemente pela string do caminho
- arquivos regulares e diretórios pai ausentes são rejeitados
- o resultado vazio só é erro quando `error_on_empty` está ativo

Invariantes:
    - O conjunto retornado nunca contém duplicatas
    - A ordem independe da ordem de iteração do filesystem
"""

from pathlib import Path

import pytest

from manifest_decoder.core.decoding.files import resolve_files
from manifest_decoder.core.exceptions import (
    NoFilesMatchedError,
    NotADirectoryResolutionError,
    PathNotFoundError,
)


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text("kind: X\n", encoding="utf-8")


def test_directory_returns_recognized_files_sorted(tmp_path: Path):
    _touch(tmp_path, "z.yaml", "b.json", "a.yml", "readme.md", "m.yaml")
    (tmp_path / "nested.yaml").mkdir()

    out = resolve_files(tmp_path)

    assert out == [str(tmp_path / n) for n in ("a.yml", "b.json", "m.yaml", "z.yaml")]


def test_prefix_selects_matching_files(tmp_path: Path):
    _touch(tmp_path, "app-a.yaml", "app-b.json", "db-a.yaml")

    out = resolve_files(tmp_path / "app-")

    assert out == [str(tmp_path / "app-a.yaml"), str(tmp_path / "app-b.json")]


def test_overlapping_extensions_are_deduplicated(tmp_path: Path):
    """
    Extensões sobrepostas (ex.: `.yaml` e `a.yaml`) casam o mesmo arquivo;
    ele aparece uma única vez no resultado.
    """
    _touch(tmp_path, "a.yaml", "b.yaml")

    out = resolve_files(tmp_path, extensions=(".yaml", "a.yaml", ".yaml"))

    assert out == [str(tmp_path / "a.yaml"), str(tmp_path / "b.yaml")]


def test_custom_extensions(tmp_path: Path):
    _touch(tmp_path, "a.yaml", "b.json")
    assert resolve_files(tmp_path, extensions=(".json",)) == [str(tmp_path / "b.json")]


def test_regular_file_is_rejected(tmp_path: Path):
    _touch(tmp_path, "a.yaml")
    with pytest.raises(NotADirectoryResolutionError):
        resolve_files(tmp_path / "a.yaml")


def test_missing_parent_directory_is_rejected(tmp_path: Path):
    with pytest.raises(PathNotFoundError):
        resolve_files(tmp_path / "missing" / "prefix-")


def test_empty_match_is_valid_by_default(tmp_path: Path):
    _touch(tmp_path, "notes.txt")
    assert resolve_files(tmp_path) == []


def test_empty_match_raises_when_requested(tmp_path: Path):
    with pytest.raises(NoFilesMatchedError):
        resolve_files(tmp_path / "nothing-", error_on_empty=True)
