from __future__ import annotations

from .lines import open_lines
from .tokens import split_line
from ..error import format_error

N_GENOTYPE_DESCRIPTORS = 5
GENOTYPE_SUFFIXES = ("_a1a1", "_a1a2", "_a2a2")


def parse_phenotype_header(tokens: list[str], path: str = "<phenotypes>") -> list[str]:
    if not tokens:
        raise format_error(path, 1, "phenotype header has no sample identifiers")
    return list(tokens)


def parse_genotype_header(tokens: list[str], path: str = "<genotypes>") -> list[str]:
    """Return the sample identifiers of a genotype header, in group order.

    The header holds five descriptor columns followed by one triplet of
    genotype-call columns per sample, named ``<id>_a1a1 <id>_a1a2 <id>_a2a2``.
    The position of a sample in the returned list is its local index.
    """
    if len(tokens) < N_GENOTYPE_DESCRIPTORS:
        raise format_error(
            path,
            1,
            "genotype header lacks the descriptor columns",
            expected=f">= {N_GENOTYPE_DESCRIPTORS}",
            actual=len(tokens),
        )
    calls = tokens[N_GENOTYPE_DESCRIPTORS:]
    n_groups, remainder = divmod(len(calls), len(GENOTYPE_SUFFIXES))
    if remainder != 0:
        raise format_error(
            path,
            1,
            "genotype columns after the descriptors must come in groups of 3",
            expected=f"a multiple of {len(GENOTYPE_SUFFIXES)}",
            actual=len(calls),
        )
    samples: list[str] = []
    for i_group in range(n_groups):
        group = calls[i_group * 3 : (i_group + 1) * 3]
        prefixes = []
        for name, suffix in zip(group, GENOTYPE_SUFFIXES):
            if len(name) <= len(suffix) or not name.endswith(suffix):
                raise format_error(
                    path,
                    1,
                    f"column {name!r} of sample group {i_group + 1} has a bad suffix",
                    expected=f"<id>{suffix}",
                    actual=name,
                )
            prefixes.append(name[: -len(suffix)])
        if len(set(prefixes)) != 1:
            raise format_error(
                path,
                1,
                "columns of sample group {} name different samples: {}".format(
                    i_group + 1, ", ".join(group)
                ),
            )
        samples.append(prefixes[0])
    return samples


def read_header_tokens(path: str) -> list[str]:
    with open_lines(path) as lines:
        first = next(lines, None)
    if first is None:
        raise format_error(path, 1, "file is empty")
    return split_line(first)


def read_phenotype_samples(path: str) -> list[str]:
    return parse_phenotype_header(read_header_tokens(path), path)


def read_genotype_samples(path: str) -> list[str]:
    return parse_genotype_header(read_header_tokens(path), path)
