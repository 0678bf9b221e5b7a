import numpy as np
import pandas as pd
import pytest

from mut_sig_refit import trinucleotides


@pytest.fixture(scope="session")
def contexts():
    return trinucleotides()


@pytest.fixture(scope="session")
def signatures(contexts):
    """Five random non-negative signatures over the 96 SBS contexts, columns summing to one."""
    rng = np.random.RandomState(42)
    values = rng.gamma(shape=0.5, scale=1.0, size=(len(contexts), 5))
    values /= values.sum(axis=0)
    return pd.DataFrame(values, index=contexts, columns=[f"SBS{i + 1}" for i in range(5)])


@pytest.fixture(scope="session")
def true_exposures(signatures):
    return pd.DataFrame(
        [[100.0, 0.0, 30.0],
         [0.0, 50.0, 0.0],
         [20.0, 0.0, 0.0],
         [0.0, 10.0, 70.0],
         [5.0, 0.0, 0.0]],
        index=signatures.columns,
        columns=["tumor_1", "tumor_2", "tumor_3"],
    )


@pytest.fixture(scope="session")
def catalog(signatures, true_exposures):
    """Catalog lying exactly in the cone of the signatures."""
    return signatures @ true_exposures


@pytest.fixture
def maf_file(tmp_path):
    columns = [
        "Hugo_Symbol", "Tumor_Sample_Barcode", "Chromosome", "Start_Position", "End_Position",
        "Variant_Type", "Reference_Allele", "Tumor_Seq_Allele2", "Ref_Tri",
    ]
    rows = [
        ["TP53", "S1", "17", "7577120", "7577120", "SNP", "C", "T", "ACG"],
        ["TP53", "S1", "17", "7577120", "7577120", "SNP", "C", "T", "ACG"],  # duplicate
        ["KRAS", "S1", "12", "25398284", "25398284", "SNP", "G", "A", "TCA"],
        ["EGFR", "S2", "7", "55259515", "55259515", "SNP", "T", "G", "ATC"],
        ["EGFR", "S2", "7", "55259516", "55259517", "DNP", "TC", "GA", ""],
        ["BRAF", "S2", "7", "140453136", "140453136", "SNP", "A", "T", ""],
    ]
    path = tmp_path / "test.maf"
    lines = ["#version 2.4", "\t".join(columns)] + ["\t".join(r) for r in rows]
    path.write_text("\n".join(lines) + "\n")
    return str(path)
