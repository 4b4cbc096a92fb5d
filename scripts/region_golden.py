# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cartograph.config import DEFAULT_TERRAIN, TerrainConfig
from cartograph.gen.recipe import build_region_recipe
from cartograph.gen.region import GENERATOR_ID, GENERATOR_VERSION, RegionMap, generate_region
from cartograph.settings import settings

logger = logging.getLogger("cartograph.scripts")

# One character per tile for terminal previews.
TILE_CHARS = {
    "forest": "T",
    "water": "~",
    "desert": ".",
    "mountains": "^",
    "grassland": '"',
    "marsh": "%",
}


def render_ascii(grid: list[list[str | None]]) -> str:
    return "\n".join("".join(TILE_CHARS.get(t, "?") if t is not None else " " for t in row) for row in grid)


def generate_entry(seed: int, ecosystem: str, config: TerrainConfig) -> tuple[dict, RegionMap]:
    rng = np.random.default_rng(int(seed))
    region = generate_region(ecosystem, rng, config=config)
    recipe = build_region_recipe(seed=seed, region=region, config=config)
    entry = {
        "seed": int(seed),
        "ecosystem": ecosystem,
        "skipped_cells": int(region.meta.get("skipped_cells", 0)),
        "hashes": dict(recipe.get("hashes", {})),
    }
    return entry, region


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate or check golden region hashes")
    parser.add_argument("--golden", type=str, default=str(settings.GOLDEN_PATH))
    parser.add_argument(
        "--write", action="store_true", help="Write/update the golden file instead of checking it"
    )
    parser.add_argument("--seeds", type=str, default="1,2,3,12345,99991")
    parser.add_argument("--ecosystem", type=str, default=settings.DEFAULT_ECOSYSTEM)
    parser.add_argument("--show", action="store_true", help="Print ASCII previews of each region")
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    seeds = [int(s.strip()) for s in args.seeds.split(",") if s.strip()]
    if not seeds:
        raise SystemExit("No seeds provided")

    config = DEFAULT_TERRAIN
    if args.ecosystem not in config.ecosystems:
        raise SystemExit(f"Unknown ecosystem {args.ecosystem!r}; choose from {sorted(config.ecosystems)}")

    out_path = Path(args.golden)
    if not args.write and not out_path.exists():
        raise SystemExit(f"Golden file not found: {out_path} (run with --write to create)")

    generated = []
    for seed in seeds:
        entry, region = generate_entry(seed, args.ecosystem, config)
        generated.append(entry)
        if args.show:
            print(f"seed {seed} ({args.ecosystem}):")
            print(render_ascii(region.detailed))
            print()

    payload = {
        "generator": {"id": GENERATOR_ID, "version": GENERATOR_VERSION},
        "ecosystem": args.ecosystem,
        "entries": generated,
    }

    if args.write:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info(f"wrote {out_path}")
        return

    golden = json.loads(out_path.read_text(encoding="utf-8"))
    golden_entries = {int(e["seed"]): e for e in golden.get("entries", [])}

    ok = True
    for e in generated:
        seed = int(e["seed"])
        g = golden_entries.get(seed)
        if g is None:
            ok = False
            print(f"missing seed in golden: {seed}")
            continue

        exp = g.get("hashes") or {}
        got = e.get("hashes") or {}
        for key in ("grid", "recipe"):
            if exp.get(key) != got.get(key):
                ok = False
                print(f"seed {seed}: {key} hash mismatch expected={exp.get(key)} got={got.get(key)}")

    if ok:
        print("ok: all golden hashes match")
        return
    raise SystemExit(1)


if __name__ == "__main__":
    main()
