from __future__ import annotations

from .samples.alignment import SampleAlignment
from .samples.index_map import Modality
from .util.files import check_parent_dir_exists, open_output

MISSING_LABEL = "NA"


def table_header(alignment: SampleAlignment) -> list[str]:
    header = ["sample"]
    for subgroup in alignment.subgroups:
        header.append(f"{subgroup}_{Modality.GENOTYPE.value}")
        header.append(f"{subgroup}_{Modality.PHENOTYPE.value}")
    return header


def table_rows(alignment: SampleAlignment) -> list[list[str]]:
    rows = []
    for i_sample, sample in enumerate(alignment.registry):
        row = [sample]
        for subgroup in alignment.subgroups:
            for modality in (Modality.GENOTYPE, Modality.PHENOTYPE):
                local = alignment.index_map(subgroup, modality).local_index(i_sample)
                row.append(MISSING_LABEL if local is None else str(local))
        rows.append(row)
    return rows


def write_sample_table(path: str, alignment: SampleAlignment) -> None:
    check_parent_dir_exists(path)
    with open_output(path) as handle:
        handle.write("\t".join(table_header(alignment)) + "\n")
        for row in table_rows(alignment):
            handle.write("\t".join(row) + "\n")
