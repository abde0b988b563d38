# File: src/vsixpack/core/pipeline.py
from __future__ import annotations

"""
Pipeline runner.

Every file is threaded through every processor's `on_file` (processor-list
order) before the next file starts; once the whole stream is done each
processor's `on_end` runs, again in list order. The first failure aborts the
run and nothing is returned.
"""

import logging
from typing import List, Sequence

from vsixpack.core.files import FileRecord
from vsixpack.errors import PackagingError, ProcessingError
from vsixpack.processors.base import Processor

logger = logging.getLogger(__name__)


def _kind(processor: Processor) -> str:
    kind = getattr(processor, "kind", None)
    return getattr(kind, "value", None) or type(processor).__name__


def process_files(processors: Sequence[Processor], files: Sequence[FileRecord]) -> List[FileRecord]:
    out: List[FileRecord] = []
    for original in files:
        file = original
        for p in processors:
            try:
                replacement = p.on_file(file)
            except PackagingError:
                raise
            except Exception as e:
                raise ProcessingError(f"{_kind(p)} processor failed on {file.path}: {e}") from e
            if replacement.path != file.path:
                raise ProcessingError(
                    f"{_kind(p)} processor renamed {file.path} to {replacement.path}; "
                    "replacements must keep the logical path"
                )
            file = replacement
        out.append(file)

    for p in processors:
        try:
            p.on_end()
        except PackagingError:
            raise
        except Exception as e:
            raise ProcessingError(f"{_kind(p)} processor failed to finalize: {e}") from e

    logger.debug("processed %d files through %d processors", len(out), len(processors))
    return out


__all__ = ["process_files"]
