from .error import AlignError, ErrorKind
from .math_utils.transforms import log10_weighted_sum, quantile_normalize
from .samples import (
    MISSING,
    IndexMap,
    Modality,
    SampleAlignment,
    SampleRegistry,
    SubgroupFiles,
    align_samples,
    build_index_map,
    build_registry,
    load_samples,
)

__version__ = "0.1.0"

__all__ = [
    "AlignError",
    "ErrorKind",
    "log10_weighted_sum",
    "quantile_normalize",
    "MISSING",
    "IndexMap",
    "Modality",
    "SampleAlignment",
    "SampleRegistry",
    "SubgroupFiles",
    "align_samples",
    "build_index_map",
    "build_registry",
    "load_samples",
]
