"""Command-line interface for chunk generation."""

import argparse
import json
import logging
import sys
import time


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for chunk generation."""
    parser = argparse.ArgumentParser(
        description="Generate Blockverse chunks from a world seed"
    )
    parser.add_argument(
        "--seed", type=str, default=None, help="World seed (default: from config)"
    )
    parser.add_argument("--x", type=int, default=0, help="Centre chunk x (default: 0)")
    parser.add_argument("--z", type=int, default=0, help="Centre chunk z (default: 0)")
    parser.add_argument(
        "--radius",
        "-r",
        type=int,
        default=0,
        help="Chunks around the centre to generate (default: 0)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Config name or path to a TOML file",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print chunk payloads as JSON"
    )
    parser.add_argument(
        "--validate", action="store_true", help="Check every chunk's column layering"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    # Import here to avoid slow startup for --help
    from ..config import Config, find_config, load_config
    from ..services.worldgen_service import ChunkPayload
    from .generator import WorldGenerator
    from .validation import validate_chunk

    config = load_config(find_config(args.config)) if args.config else Config()
    seed = args.seed or config.default_seed

    generator = WorldGenerator(
        seed,
        options=config.generation,
        structures=config.structures,
        biomes=config.biomes,
    )

    coords = [
        (x, z)
        for x in range(args.x - args.radius, args.x + args.radius + 1)
        for z in range(args.z - args.radius, args.z + args.radius + 1)
    ]

    start_time = time.time()
    results = generator.generate_many(coords)
    gen_time = time.time() - start_time

    failures = 0
    payloads = []
    for generated in results:
        chunk = generated.chunk
        if args.validate:
            result = validate_chunk(chunk, config.generation)
            if not result.passed:
                failures += 1

        if args.json:
            payloads.append(ChunkPayload.from_generated(generated).to_dict())
        else:
            biome = chunk.biome.value if chunk.biome else "-"
            print(
                f"chunk ({chunk.chunk_x:>4}, {chunk.chunk_z:>4})  "
                f"heights {int(chunk.heightmap.min()):>3}..{int(chunk.heightmap.max()):<3}  "
                f"biome {biome:<9}  blocks {len(chunk.blocks):>6}  "
                f"structures {len(generated.structures):>3}"
            )

    if args.json:
        json.dump(payloads, sys.stdout)
        print()
    else:
        print()
        print(f"Generated {len(results)} chunks for seed {seed!r} in {gen_time:.2f}s")

    if failures:
        print(f"{failures} chunks failed validation", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
