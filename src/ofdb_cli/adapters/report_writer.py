"""Serialize reports as JSON."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

if TYPE_CHECKING:
    from pathlib import Path

_ANY = TypeAdapter(Any)


def dump_report(report: object) -> str:
    return _ANY.dump_json(report, indent=2).decode("utf-8")


def write_report(report: object, path: Path | None = None) -> None:
    """Write ``report`` to ``path``, or to stdout when no path is given."""

    document = dump_report(report)
    if path is None:
        sys.stdout.write(document + "\n")
        return
    path.write_text(document + "\n", encoding="utf-8")
