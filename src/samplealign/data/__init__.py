from .headers import (
    parse_genotype_header,
    parse_phenotype_header,
    read_genotype_samples,
    read_phenotype_samples,
)
from .lines import LineStream, open_lines
from .lists import load_one_column, load_one_column_numbers, load_two_column
from .phenotypes import normalize_phenotype_file
from .tokens import is_comment, split_line, validate_count

__all__ = [
    "parse_genotype_header",
    "parse_phenotype_header",
    "read_genotype_samples",
    "read_phenotype_samples",
    "LineStream",
    "open_lines",
    "load_one_column",
    "load_one_column_numbers",
    "load_two_column",
    "normalize_phenotype_file",
    "is_comment",
    "split_line",
    "validate_count",
]
