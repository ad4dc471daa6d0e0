"""
Persistence of the scan result.

`scan` writes the result as pretty-printed JSON; `list`, `bindings`, `lint` and
`export` read it back. Key order follows the model definitions, so two scans of
an unchanged tree differ only in `meta.generated_at`.
"""

import json
from pathlib import Path

from core.exceptions import CacheFormatError, CacheNotFoundError
from core.file_io import FileReader, FileWriter, FilesystemFileReader
from core.models import ScanResult


def dump_scan_result(result: ScanResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n"


def save_scan_result(result: ScanResult, writer: FileWriter) -> None:
    """
    Serialize `result` and write it through `writer`.

    Raises:
        InvalidFilePathError: If the writer has no target path.
        FileWriteError: If the write fails.
    """
    writer.write_file(dump_scan_result(result), mode="w")


def load_scan_result(cache_path: Path, reader: FileReader | None = None) -> ScanResult:
    """
    Read a cached scan result back into models.

    Args:
        cache_path: Location of the cache file.
        reader: Optional file reader. Defaults to FilesystemFileReader.

    Returns:
        ScanResult: The result exactly as it was saved.

    Raises:
        CacheNotFoundError: If there is no file at `cache_path`.
        CacheFormatError: If the file is not JSON or misses required keys.
        FileReadError: If the file exists but cannot be read.
    """
    if not cache_path.is_file():
        raise CacheNotFoundError(cache_path)

    file_reader = reader if reader is not None else FilesystemFileReader()
    content = file_reader.read_file(cache_path)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise CacheFormatError(
            cache_path, f"Cache file is not valid JSON: {cache_path} ({e.msg})"
        ) from e

    try:
        return ScanResult.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise CacheFormatError(
            cache_path, f"Cache file has an unexpected structure: {cache_path}"
        ) from e
