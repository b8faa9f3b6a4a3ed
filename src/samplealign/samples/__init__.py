from .alignment import SampleAlignment, SubgroupFiles, align_samples, load_samples
from .index_map import MISSING, IndexMap, Modality, build_index_map
from .registry import SampleRegistry, build_registry

__all__ = [
    "SampleAlignment",
    "SubgroupFiles",
    "align_samples",
    "load_samples",
    "MISSING",
    "IndexMap",
    "Modality",
    "build_index_map",
    "SampleRegistry",
    "build_registry",
]
