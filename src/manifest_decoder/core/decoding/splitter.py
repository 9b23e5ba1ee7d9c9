# src/manifest_decoder/core/decoding/splitter.py
"""
Separador de documentos (Document Splitter).

Divide um stream com um ou mais documentos concatenados em blocos de
bytes, um por documento. O delimitador é uma linha contendo apenas `---`
(espaços em branco ou um comentário `#` podem seguir o delimitador).

Decisões arquiteturais:
    - A sequência é lazy e de passagem única
    - Um stream sem delimitador é um único documento
    - Blocos vazios (só espaços/comentários) são descartados
    - Blocos JSON não recebem tratamento especial aqui
    - Erros de leitura do stream propagam imediatamente
"""

from __future__ import annotations

from typing import IO, Iterator, Optional, Union

from manifest_decoder.core.exceptions import DocumentSyntaxError

SEPARATOR = b"---"


def _has_content(block: bytes) -> bool:
    for line in block.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith(b"#"):
            return True
    return False


def _is_separator(line: bytes, line_no: int, source: Optional[str]) -> bool:
    content = line.rstrip(b"\r\n")
    if not content.startswith(SEPARATOR):
        return False
    trailing = content[len(SEPARATOR):].strip()
    if trailing and not trailing.startswith(b"#"):
        raise DocumentSyntaxError(
            "invalid document separator: only comments may follow '---'",
            details={"source": source, "line": line_no},
        )
    return True


def split_documents(stream: IO[Union[bytes, str]], source: Optional[str] = None) -> Iterator[bytes]:
    """
    Produz, de forma lazy, um bloco de bytes por documento do stream.

    `source` identifica a origem do stream nos detalhes dos erros.
    """
    buffer = bytearray()
    for line_no, line in enumerate(stream, start=1):
        if isinstance(line, str):
            line = line.encode("utf-8")
        if _is_separator(line, line_no, source):
            if _has_content(bytes(buffer)):
                yield bytes(buffer)
            buffer.clear()
            continue
        buffer.extend(line)

    if _has_content(bytes(buffer)):
        yield bytes(buffer)


def is_json_document(block: bytes) -> bool:
    """Um bloco é JSON quando o primeiro caractere significativo é `{`."""
    return block.lstrip()[:1] == b"{"
