import gzip
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _write(path: Path, text: str) -> Path:
    if path.suffix == ".gz":
        with gzip.open(path, "wt", encoding="utf-8") as handle:
            handle.write(text)
    else:
        path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def reference_files(tmp_path):
    """Two subgroups: ind1-3 phenotyped in s1, ind1 in s2; ind1-2 and ind1,4 genotyped."""
    files = {
        "pheno_s1": _write(tmp_path / "phenotypes_s1.txt", "ind1 ind2 ind3\n"),
        "pheno_s2": _write(tmp_path / "phenotypes_s2.txt", "ind1\n"),
        "geno_s1": _write(
            tmp_path / "genotypes_s1.imp",
            "chr rs coord a1 a2 ind1_a1a1 ind1_a1a2 ind1_a2a2"
            " ind2_a1a1 ind2_a1a2 ind2_a2a2\n",
        ),
        "geno_s2": _write(
            tmp_path / "genotypes_s2.imp.gz",
            "chr rs coord a1 a2 ind1_a1a1 ind1_a1a2 ind1_a2a2"
            " ind4_a1a1 ind4_a1a2 ind4_a2a2\n",
        ),
    }
    return {key: str(path) for key, path in files.items()}
