from __future__ import annotations

import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from ..data.headers import read_genotype_samples, read_phenotype_samples
from ..error import AlignError, configuration_error, for_context
from ..util.duration_format import format_elapsed
from .index_map import IndexMap, Modality, build_index_map
from .registry import SampleRegistry, build_registry


@dataclass(frozen=True)
class SubgroupFiles:
    name: str
    geno: str
    pheno: str


@dataclass(frozen=True)
class SampleAlignment:
    registry: SampleRegistry
    subgroups: tuple[str, ...]
    geno_maps: Mapping[str, IndexMap]
    pheno_maps: Mapping[str, IndexMap]

    def index_map(self, subgroup: str, modality: Modality) -> IndexMap:
        maps = self.geno_maps if modality == Modality.GENOTYPE else self.pheno_maps
        try:
            return maps[subgroup]
        except KeyError as exc:
            raise configuration_error(f"Unknown subgroup {subgroup}.") from exc

    def n_samples(self) -> int:
        return len(self.registry)

    def n_subgroups(self) -> int:
        return len(self.subgroups)


def align_samples(
    subgroups: Sequence[str],
    phenotype_headers: Sequence[Sequence[str]],
    genotype_headers: Sequence[Sequence[str]],
) -> SampleAlignment:
    registry = build_registry(subgroups, phenotype_headers, genotype_headers)
    geno_maps: dict[str, IndexMap] = {}
    pheno_maps: dict[str, IndexMap] = {}
    for subgroup, pheno_header, geno_header in zip(
        subgroups, phenotype_headers, genotype_headers
    ):
        if subgroup in geno_maps:
            raise configuration_error(f"Subgroup {subgroup} is declared twice.")
        geno_maps[subgroup] = build_index_map(
            registry, subgroup, Modality.GENOTYPE, geno_header
        )
        pheno_maps[subgroup] = build_index_map(
            registry, subgroup, Modality.PHENOTYPE, pheno_header
        )
    return SampleAlignment(
        registry=registry,
        subgroups=tuple(subgroups),
        geno_maps=MappingProxyType(geno_maps),
        pheno_maps=MappingProxyType(pheno_maps),
    )


def load_samples(subgroups: Sequence[SubgroupFiles], verbose: int = 0) -> SampleAlignment:
    """Read the header of every file and align all samples.

    Any unreadable or malformed file aborts the whole load.
    """
    if not subgroups:
        raise configuration_error("No subgroups to load samples from.")
    start = time.perf_counter()
    if verbose > 0:
        print(f"Loading samples for {len(subgroups)} subgroups")
    phenotype_headers: list[list[str]] = []
    genotype_headers: list[list[str]] = []
    for item in subgroups:
        try:
            phenotype_headers.append(read_phenotype_samples(item.pheno))
            genotype_headers.append(read_genotype_samples(item.geno))
        except AlignError as exc:
            raise for_context(f"Subgroup {item.name}", exc) from exc
    alignment = align_samples(
        [item.name for item in subgroups], phenotype_headers, genotype_headers
    )
    if verbose > 0:
        print(
            f"Found {alignment.n_samples()} samples in "
            f"{format_elapsed(time.perf_counter() - start)}"
        )
    if verbose > 1:
        for subgroup in alignment.subgroups:
            print(
                f"{subgroup}: {alignment.geno_maps[subgroup].n_present} genotyped, "
                f"{alignment.pheno_maps[subgroup].n_present} phenotyped"
            )
    return alignment
