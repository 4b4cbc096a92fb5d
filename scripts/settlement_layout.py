# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np
from pydantic import ValidationError

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cartograph.layout import LayoutInputError, compute_layout, prepare_locations
from cartograph.settings import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Lay out settlement locations from a JSON file")
    parser.add_argument("path", type=str, help="JSON file: a list of location records, or {'locations': [...]}")
    parser.add_argument("--seed", type=int, default=settings.SEED)
    parser.add_argument("--out", type=str, default=None)
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    data = json.loads(Path(args.path).read_text(encoding="utf-8"))
    records = data.get("locations", []) if isinstance(data, dict) else data

    rng = np.random.default_rng(args.seed)
    meta: dict = {}
    try:
        nodes = prepare_locations(records, rng=rng)
        positions = compute_layout(nodes, meta=meta)
    except (ValidationError, LayoutInputError) as e:
        raise SystemExit(f"invalid location records: {e}") from e

    payload = {
        "positions": {name: pos.model_dump() for name, pos in positions.items()},
        "fixups": list(meta.get("fixups", [])),
    }
    text = json.dumps(payload, indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        print(f"wrote {out_path}")
        return
    print(text)


if __name__ == "__main__":
    main()
