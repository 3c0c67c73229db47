"""Anexos binários para chamadas à Bot API.

Um parâmetro InputFile força codificação multipart/form-data. A origem pode ser:
- bytes: enviados como arquivo
- caminho de um arquivo local existente: lido e enviado como arquivo
- qualquer outro valor (file_id, URL): enviado como campo de formulário comum
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class InputFile:
    """Parâmetro de arquivo para métodos send_* da Bot API."""

    source: Any
    filename: str | None = None


def has_input_file(params: dict[str, Any]) -> bool:
    """Retorna True se algum parâmetro carrega anexo com origem definida."""
    return any(isinstance(value, InputFile) and value.source for value in params.values())


def _is_local_file(source: Any) -> bool:
    if not isinstance(source, (str, os.PathLike)):
        return False
    return Path(source).is_file()


def _encode_field(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value)
    return str(value)


def build_multipart(
    params: dict[str, Any],
) -> tuple[dict[str, str], dict[str, tuple[str, bytes]]]:
    """Separa parâmetros em campos de formulário e arquivos.

    Faz IO de disco para origens que são caminhos locais; chamar fora do
    event loop (asyncio.to_thread).

    Args:
        params: Parâmetros do método remoto

    Returns:
        (data, files) no formato aceito por httpx
    """
    data: dict[str, str] = {}
    files: dict[str, tuple[str, bytes]] = {}

    for key, value in params.items():
        if value is None:
            continue
        if not isinstance(value, InputFile):
            data[key] = _encode_field(value)
            continue
        source = value.source
        if not source:
            continue
        if isinstance(source, (bytes, bytearray)):
            files[key] = (value.filename or key, bytes(source))
        elif _is_local_file(source):
            path = Path(source)
            files[key] = (value.filename or path.name, path.read_bytes())
        else:
            data[key] = str(source)

    return data, files
