"""Sample address generation with worldwide locale support."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable

from faker import Faker

from map_link.models.base import AddressRecord


@dataclass(frozen=True)
class CountryDistribution:
    """Weighted distribution of countries for address generation.

    Parameters
    ----------
    weights : dict[str, float]
        Mapping of ISO 3166-1 alpha-2 country code to weight.
        Weights are relative (do not need to sum to 1.0).
    """

    weights: dict[str, float] = field(default_factory=lambda: {"US": 1.0})

    @classmethod
    def worldwide(cls) -> "CountryDistribution":
        """Default: US-heavy mix across the locales with dedicated generators."""
        return cls(
            weights={
                "US": 0.40,
                "GB": 0.15,
                "DE": 0.10,
                "FR": 0.10,
                "BR": 0.10,
                "JP": 0.05,
                "MX": 0.05,
                "ES": 0.05,
            }
        )

    @classmethod
    def single(cls, country: str) -> "CountryDistribution":
        """100% addresses from one country."""
        return cls(weights={country: 1.0})


# Mapping of ISO country code -> Faker locale
LOCALE_MAP: dict[str, str] = {
    "BR": "pt_BR",
    "US": "en_US",
    "GB": "en_GB",
    "DE": "de_DE",
    "FR": "fr_FR",
    "ES": "es_ES",
    "JP": "ja_JP",
    "MX": "es_MX",
}


class AddressFactory:
    """Generate realistic ``AddressRecord`` values for multiple countries.

    Each configured country gets a dedicated Faker instance so that street
    names, localities and postal codes follow local conventions.

    Parameters
    ----------
    distribution : CountryDistribution | None
        Country weight distribution. Defaults to ``worldwide()``.
    seed : int | None
        Random seed for reproducibility.
    """

    def __init__(
        self,
        distribution: CountryDistribution | None = None,
        seed: int | None = None,
    ) -> None:
        self._distribution = distribution or CountryDistribution.worldwide()
        self._countries = list(self._distribution.weights.keys())
        self._weights = list(self._distribution.weights.values())
        self._random = random.Random(seed)
        self._seed = seed
        self._fakers: dict[str, Faker] = {}

        for country_code in self._countries:
            self._fakers[country_code] = self._make_faker(country_code)

    def _make_faker(self, country: str) -> Faker:
        faker_instance = Faker(LOCALE_MAP.get(country, "en_US"))
        if self._seed is not None:
            faker_instance.seed_instance(self._seed)
        return faker_instance

    def generate(self, country: str | None = None) -> AddressRecord:
        """Generate an address, optionally for a specific country.

        Parameters
        ----------
        country : str | None
            ISO 3166-1 alpha-2 code. If ``None``, picks based on
            the configured distribution.
        """
        if country is None:
            country = self._random.choices(self._countries, weights=self._weights, k=1)[0]

        fake = self._fakers.get(country)
        if fake is None:
            # Country not in distribution
            fake = self._make_faker(country)
            self._fakers[country] = fake

        generator = _COUNTRY_GENERATORS.get(country, _generate_generic)
        return generator(fake, self._random, country)

    def generate_batch(self, count: int, country: str | None = None) -> list[AddressRecord]:
        """Generate ``count`` addresses."""
        return [self.generate(country) for _ in range(count)]


# ---------------------------------------------------------------------------
# Per-country address generators
# ---------------------------------------------------------------------------

def _generate_us(fake: Faker, rng: random.Random, country: str) -> AddressRecord:
    return AddressRecord(
        address_line1=f"{rng.randint(1, 9999)} {fake.street_name()}",
        address_line2=rng.choice(["", "", "", f"Apt {rng.randint(1, 500)}"]),
        locality=fake.city(),
        administrative_area=fake.state_abbr(),
        postal_code=fake.zipcode(),
        country_code="US",
    )


def _generate_gb(fake: Faker, rng: random.Random, country: str) -> AddressRecord:
    return AddressRecord(
        address_line1=f"{rng.randint(1, 999)} {fake.street_name()}",
        address_line2=rng.choice(["", "", f"Flat {rng.randint(1, 50)}"]),
        locality=fake.city(),
        administrative_area=fake.county(),
        postal_code=fake.postcode(),
        country_code="GB",
    )


def _generate_br(fake: Faker, rng: random.Random, country: str) -> AddressRecord:
    return AddressRecord(
        address_line1=f"{fake.street_name()}, {rng.randint(1, 9999)}",
        address_line2=rng.choice(["", "", "", f"Apto {rng.randint(1, 500)}"]),
        locality=fake.city(),
        administrative_area=fake.estado_sigla(),
        dependent_locality=fake.bairro(),
        postal_code=fake.postcode(),
        country_code="BR",
    )


def _generate_de(fake: Faker, rng: random.Random, country: str) -> AddressRecord:
    return AddressRecord(
        address_line1=f"{fake.street_name()} {rng.randint(1, 200)}",
        locality=fake.city(),
        postal_code=fake.postcode(),
        country_code="DE",
    )


def _generate_fr(fake: Faker, rng: random.Random, country: str) -> AddressRecord:
    return AddressRecord(
        address_line1=f"{rng.randint(1, 200)} {fake.street_name()}",
        locality=fake.city(),
        postal_code=fake.postcode(),
        country_code="FR",
    )


def _generate_jp(fake: Faker, rng: random.Random, country: str) -> AddressRecord:
    return AddressRecord(
        address_line1=f"{fake.town()}{fake.chome()}{fake.ban()}{fake.gou()}",
        locality=fake.city(),
        administrative_area=fake.prefecture(),
        postal_code=fake.postcode(),
        country_code="JP",
    )


def _generate_mx(fake: Faker, rng: random.Random, country: str) -> AddressRecord:
    return AddressRecord(
        address_line1=f"{fake.street_name()} {rng.randint(1, 9999)}",
        address_line2=rng.choice(["", "", "", f"Depto {rng.randint(1, 300)}"]),
        locality=fake.city(),
        administrative_area=fake.state(),
        postal_code=fake.postcode(),
        country_code="MX",
    )


def _generate_generic(fake: Faker, rng: random.Random, country: str) -> AddressRecord:
    """Fallback generator using common Faker methods."""
    state = ""
    for method in ("state", "state_abbr", "province", "region"):
        if hasattr(fake, method):
            state = getattr(fake, method)()
            break

    return AddressRecord(
        address_line1=f"{fake.street_name()} {rng.randint(1, 9999)}",
        locality=fake.city(),
        administrative_area=state,
        postal_code=fake.postcode(),
        country_code=country,
    )


_COUNTRY_GENERATORS: dict[str, Callable[[Faker, random.Random, str], AddressRecord]] = {
    "US": _generate_us,
    "GB": _generate_gb,
    "BR": _generate_br,
    "DE": _generate_de,
    "FR": _generate_fr,
    "JP": _generate_jp,
    "MX": _generate_mx,
}
