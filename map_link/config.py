"""Configuration management for map-link."""

from dataclasses import dataclass, field
from pathlib import Path

from map_link.exceptions import ConfigurationError
from map_link.formatter import UnmappedCountryPolicy


def parse_policy(value: str) -> UnmappedCountryPolicy:
    """Parse an unmapped-country policy name ("fail" or "omit")."""
    try:
        return UnmappedCountryPolicy(value.strip().lower())
    except ValueError:
        allowed = ", ".join(p.value for p in UnmappedCountryPolicy)
        raise ConfigurationError(
            f"Invalid unmapped country policy {value!r} (expected one of: {allowed})"
        ) from None


@dataclass
class LinkConfig:
    """Map link construction settings."""

    provider: str = "google_directions"
    on_unmapped_country: UnmappedCountryPolicy = UnmappedCountryPolicy.FAIL


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class MapLinkConfig:
    """Main configuration for map-link."""

    link: LinkConfig = field(default_factory=LinkConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    country_weights: dict[str, float] | None = None

    @classmethod
    def from_env(cls) -> "MapLinkConfig":
        """Create config from environment variables."""
        import json
        import os

        link = LinkConfig(
            provider=os.getenv("MAP_LINK_PROVIDER", "google_directions"),
            on_unmapped_country=parse_policy(
                os.getenv("MAP_LINK_UNMAPPED_COUNTRY", "fail")
            ),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        country_weights_str = os.getenv("COUNTRY_WEIGHTS")
        try:
            country_weights = json.loads(country_weights_str) if country_weights_str else None
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"COUNTRY_WEIGHTS is not valid JSON: {exc}") from exc

        return cls(
            link=link,
            output=output,
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            country_weights=country_weights,
        )
