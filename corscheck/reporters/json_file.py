"""JSON file output — one pretty-printed array per non-empty category."""

import json
from pathlib import Path
from typing import Dict, List, Sequence

from corscheck.core.models import Category, CORSResult


def write_results(path: Path, results: Sequence[CORSResult]) -> None:
    """Write *results* as an indented JSON array to *path*."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump([r.to_dict() for r in results], f, indent=2)
        f.write("\n")


def write_buckets(groups: Dict[Category, List[CORSResult]], output_dir=".") -> List[Path]:
    """Write every non-empty bucket to its category file.

    Args:
        groups: output of group_results()
        output_dir: directory for the files, created when missing

    Returns:
        Paths written, in category order
    """
    out = Path(output_dir)
    written: List[Path] = []
    for category in Category:
        results = groups.get(category) or []
        if not results:
            continue
        out.mkdir(parents=True, exist_ok=True)
        path = out / category.filename
        write_results(path, results)
        written.append(path)
    return written
