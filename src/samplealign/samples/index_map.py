from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from .registry import SampleRegistry

MISSING = -1


class Modality(Enum):
    GENOTYPE = "geno"
    PHENOTYPE = "pheno"


@dataclass(frozen=True, eq=False)
class IndexMap:
    subgroup: str
    modality: Modality
    indices: np.ndarray

    def __len__(self) -> int:
        return len(self.indices)

    def local_index(self, i_sample: int) -> int | None:
        value = int(self.indices[i_sample])
        if value == MISSING:
            return None
        return value

    def present_mask(self) -> np.ndarray:
        return self.indices != MISSING

    def global_indices(self) -> np.ndarray:
        return np.flatnonzero(self.present_mask())

    def local_indices(self) -> np.ndarray:
        return self.indices[self.present_mask()]

    @property
    def n_present(self) -> int:
        return int(np.count_nonzero(self.present_mask()))


def build_index_map(
    registry: SampleRegistry,
    subgroup: str,
    modality: Modality,
    local_samples: Sequence[str],
) -> IndexMap:
    lookup: dict[str, int] = {}
    for i_local, sample in enumerate(local_samples):
        lookup.setdefault(sample, i_local)
    indices = np.fromiter(
        (lookup.get(sample, MISSING) for sample in registry),
        dtype=np.int64,
        count=len(registry),
    )
    indices.flags.writeable = False
    return IndexMap(subgroup=subgroup, modality=modality, indices=indices)
