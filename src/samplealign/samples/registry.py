from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from ..error import configuration_error


@dataclass(frozen=True)
class SampleRegistry:
    samples: tuple[str, ...]
    _positions: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        positions: dict[str, int] = {}
        for i_sample, sample in enumerate(self.samples):
            if sample in positions:
                raise configuration_error(f"Sample {sample} occurs twice in the registry.")
            positions[sample] = i_sample
        object.__setattr__(self, "_positions", positions)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[str]:
        return iter(self.samples)

    def __getitem__(self, i_sample: int) -> str:
        return self.samples[i_sample]

    def __contains__(self, sample: object) -> bool:
        return sample in self._positions

    def index_of(self, sample: str) -> int | None:
        return self._positions.get(sample)


def build_registry(
    subgroups: Sequence[str],
    phenotype_headers: Sequence[Sequence[str]],
    genotype_headers: Sequence[Sequence[str]],
) -> SampleRegistry:
    """Collect every sample of every subgroup into one ordered catalog.

    Phenotyped samples come first, subgroup by subgroup in declared order,
    then the genotyped samples not seen yet. Within a file, header order is
    kept. Identical inputs always give the same registry.
    """
    n_subgroups = len(subgroups)
    if len(phenotype_headers) != n_subgroups or len(genotype_headers) != n_subgroups:
        raise configuration_error(
            "Got {} subgroups but {} phenotype and {} genotype headers.".format(
                n_subgroups, len(phenotype_headers), len(genotype_headers)
            )
        )
    seen: set[str] = set()
    samples: list[str] = []
    for headers in (phenotype_headers, genotype_headers):
        for header in headers:
            for sample in header:
                if sample not in seen:
                    seen.add(sample)
                    samples.append(sample)
    return SampleRegistry(tuple(samples))
