#!/usr/bin/env python3
"""Generate map links for sample or supplied addresses.

Addresses come either from a JSON file (a list of objects using the
AddressRecord field names) or from the Faker-backed AddressFactory.
Links are written to the console or to one JSON file per provider.

Defaults are read from the environment (see MapLinkConfig.from_env) and
can be overridden on the command line.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from map_link.config import MapLinkConfig, parse_policy
from map_link.exceptions import MapLinkError
from map_link.generators.address import AddressFactory, CountryDistribution
from map_link.logging import setup_logging
from map_link.models.base import AddressRecord, MapLinkResult
from map_link.registry import default_registry
from map_link.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)


def load_addresses(path: Path) -> list[AddressRecord]:
    """Load address records from a JSON list."""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path} must contain a JSON list of address objects")
    return [AddressRecord.from_mapping(item) for item in raw]


def build_links(
    addresses: list[AddressRecord],
    provider_ids: list[str],
    config: MapLinkConfig,
) -> dict[str, list[MapLinkResult]]:
    """Build links for every address with every requested provider."""
    registry = default_registry()
    results: dict[str, list[MapLinkResult]] = {}
    for provider_id in provider_ids:
        link = registry.create(
            provider_id, on_unmapped_country=config.link.on_unmapped_country
        )
        results[provider_id] = [link.get_result(address) for address in addresses]
        logger.info("Built %d %s links", len(addresses), provider_id)
    return results


def main() -> None:
    """Main entry point."""
    config = MapLinkConfig.from_env()
    registry = default_registry()

    parser = argparse.ArgumentParser(description="Generate map links for addresses")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="JSON file with a list of addresses (default: generate addresses)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of addresses to generate (default: 10)",
    )
    parser.add_argument(
        "--country",
        type=str,
        default=None,
        help="Generate addresses for a single ISO country code only",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--provider",
        action="append",
        choices=sorted(registry.available()),
        help=f"Map link provider, repeatable (default: {config.link.provider})",
    )
    parser.add_argument(
        "--on-unmapped-country",
        type=str,
        default=config.link.on_unmapped_country.value,
        help="Policy for unknown country codes: fail or omit",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write JSON files here instead of printing to the console",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help="Log level (default: INFO)",
    )
    args = parser.parse_args()

    setup_logging(level=args.log_level, format_type=config.log_format)

    try:
        config.link.on_unmapped_country = parse_policy(args.on_unmapped_country)

        if args.input is not None:
            addresses = load_addresses(args.input)
            logger.info("Loaded %d addresses from %s", len(addresses), args.input)
        else:
            if args.country:
                distribution = CountryDistribution.single(args.country)
            elif config.country_weights:
                distribution = CountryDistribution(weights=config.country_weights)
            else:
                distribution = None
            factory = AddressFactory(distribution=distribution, seed=args.seed)
            addresses = factory.generate_batch(args.count)
            logger.info("Generated %d addresses", len(addresses))

        results = build_links(addresses, args.provider or [config.link.provider], config)

        if args.output_dir is not None:
            sink = JsonFileSink(args.output_dir, pretty=config.output.pretty_json)
        else:
            sink = ConsoleSink(pretty=True)
        for provider_id, records in results.items():
            sink.write_batch(provider_id, records)
        sink.close()
    except (MapLinkError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
