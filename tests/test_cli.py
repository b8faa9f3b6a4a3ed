import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


def _run(args, cwd) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "src")
    return subprocess.run(
        [sys.executable, "-m", "samplealign", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
    )


def _write_list_config(work_dir: Path, reference_files) -> Path:
    (work_dir / "list_genotypes.txt").write_text(
        f"# subgroup genotype-file\ns1 {reference_files['geno_s1']}\n"
        f"s2 {reference_files['geno_s2']}\n",
        encoding="utf-8",
    )
    (work_dir / "list_phenotypes.txt").write_text(
        f"s1 {reference_files['pheno_s1']}\ns2 {reference_files['pheno_s2']}\n",
        encoding="utf-8",
    )
    config = work_dir / "config.toml"
    config.write_text(
        "[files]\n"
        'out = "samples.tsv"\n'
        'geno = "list_genotypes.txt"\n'
        'pheno = "list_phenotypes.txt"\n',
        encoding="utf-8",
    )
    return config


def test_samples_command_writes_table(tmp_path, reference_files):
    config = _write_list_config(tmp_path, reference_files)

    result = _run(["samples", "-f", str(config), "-v", "2"], cwd=tmp_path)

    assert result.returncode == 0, result.stdout + result.stderr
    assert "Found 4 samples" in result.stdout
    assert result.stdout.strip().endswith("Done!")
    lines = (tmp_path / "samples.tsv").read_text(encoding="utf-8").splitlines()
    assert lines == [
        "sample\ts1_geno\ts1_pheno\ts2_geno\ts2_pheno",
        "ind1\t0\t0\t0\t0",
        "ind2\t1\t1\tNA\tNA",
        "ind3\tNA\t2\tNA\tNA",
        "ind4\tNA\tNA\t1\tNA",
    ]


def test_samples_dry_run_reads_no_data(tmp_path, reference_files):
    config = _write_list_config(tmp_path, reference_files)

    result = _run(["samples", "-f", str(config), "--dry", "-o", "other.tsv"], cwd=tmp_path)

    assert result.returncode == 0, result.stdout + result.stderr
    assert 'out = "other.tsv"' in result.stdout
    assert not (tmp_path / "other.tsv").exists()


def test_samples_command_reports_format_errors(tmp_path, reference_files):
    bad = tmp_path / "bad.imp"
    bad.write_text("chr rs coord a1 a2 ind1_a1a1 ind1_a1a2\n", encoding="utf-8")
    config = tmp_path / "config.toml"
    config.write_text(
        "[[subgroups]]\n"
        'name = "s1"\n'
        f'geno = "{bad.as_posix()}"\n'
        f'pheno = "{Path(reference_files["pheno_s1"]).as_posix()}"\n',
        encoding="utf-8",
    )

    result = _run(["samples", "-f", str(config), "-v", "0"], cwd=tmp_path)

    assert result.returncode == 1
    assert result.stdout.startswith("Error: Format error: ")
    assert f"{bad.as_posix()}:1: Subgroup s1:" in result.stdout
    assert not (tmp_path / "samples.tsv").exists()


def test_missing_option(tmp_path):
    result = _run(["samples"], cwd=tmp_path)
    assert result.returncode == 1
    assert "--conf-file" in result.stdout


def test_qnorm_command(tmp_path):
    pheno = tmp_path / "phenotypes.txt"
    pheno.write_text("ind1 ind2 ind3\ngene1 2.0 NA 1.0\n", encoding="utf-8")

    result = _run(["qnorm", "-i", str(pheno), "-o", "normalized.txt"], cwd=tmp_path)

    assert result.returncode == 0, result.stdout + result.stderr
    rows = (tmp_path / "normalized.txt").read_text(encoding="utf-8").splitlines()
    assert rows[0] == "ind1\tind2\tind3"
    gene = rows[1].split("\t")
    assert gene[0] == "gene1"
    assert gene[2] == "NA"
    assert float(gene[1]) > 0
    assert float(gene[1]) == pytest.approx(-float(gene[3]))


def test_samples_error_is_last_line_with_progress(tmp_path, reference_files):
    missing = tmp_path / "missing.imp"
    config = tmp_path / "config.toml"
    config.write_text(
        "[[subgroups]]\n"
        'name = "s1"\n'
        f'geno = "{missing.as_posix()}"\n'
        f'pheno = "{Path(reference_files["pheno_s1"]).as_posix()}"\n',
        encoding="utf-8",
    )

    result = _run(["samples", "-f", str(config)], cwd=tmp_path)

    assert result.returncode == 1
    lines = result.stdout.strip().splitlines()
    assert lines[0] == "Loading samples for 1 subgroups"
    assert lines[-1].startswith("Error: I/O error: ")
