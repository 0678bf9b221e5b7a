import logging
import os

import pandas as pd

from .contexts import complement, trinucleotides

logger = logging.getLogger(__name__)

MAF_COLUMNS = [
    'Tumor_Sample_Barcode', 'Chromosome', 'Start_Position', 'End_Position',
    'Reference_Allele', 'Tumor_Seq_Allele2', 'Ref_Tri',
]


def read_maf(path: str) -> pd.DataFrame:
    """
    Read SNP records of a MAF file.

    The MAF must contain a `Ref_Tri` column with the trinucleotide around the
    mutation site, given on the strand where the central base is a pyrimidine.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File {path} does not exist")

    with open(path) as f:
        n_header = 0
        for line in f:
            if not line.startswith('#'):
                break
            n_header += 1

    df = pd.read_csv(path, sep='\t', skiprows=n_header, dtype=str, keep_default_na=False)
    if 'Ref_Tri' not in df.columns:
        raise ValueError("Column Ref_Tri does not exist in MAF")
    if 'End_position' in df.columns:
        df = df.rename(columns={'End_position': 'End_Position'})

    missing = set(MAF_COLUMNS + ['Variant_Type']) - set(df.columns)
    if missing:
        raise ValueError(f"MAF is missing required columns: {sorted(missing)}")

    df = df.loc[df['Variant_Type'] == 'SNP', MAF_COLUMNS]
    df = df[~df.duplicated() & (df['Ref_Tri'] != '')]
    return df.reset_index(drop=True)


def snv_context(ref: str, alt: str, ref_tri: str) -> str:
    """Trinucleotide label, e.g. `A[C>T]G`, with purine alleles complemented."""
    if len(ref_tri) != 3:
        raise ValueError(f"Ref_Tri must be a trinucleotide, got {ref_tri!r}")
    comp_ref, comp_alt = complement(ref), complement(alt)
    if ref in ('A', 'G'):
        ref, alt = comp_ref, comp_alt
    return f"{ref_tri[0]}[{ref}>{alt}]{ref_tri[2]}"


def maf_to_catalog(path: str) -> pd.DataFrame:
    """
    Build a trinucleotide count matrix from a MAF file.

    Returns
    -------
    pandas.DataFrame
        96 mutation contexts in rows (ordered as `trinucleotides()`),
        `Tumor_Sample_Barcode` values in columns.
    """
    snvs = read_maf(path)
    labels = trinucleotides()

    if snvs.empty:
        logger.warning("No SNPs with trinucleotide context found in %s", path)
        return pd.DataFrame(index=pd.Index(labels), dtype=int)

    snvs['context'] = [
        snv_context(ref, alt, tri)
        for ref, alt, tri in zip(
            snvs['Reference_Allele'], snvs['Tumor_Seq_Allele2'], snvs['Ref_Tri']
        )
    ]
    unknown = set(snvs['context']) - set(labels)
    if unknown:
        raise ValueError(f"Unrecognized trinucleotide contexts: {sorted(unknown)[:5]}")

    catalog = (
        snvs
        .groupby(['context', 'Tumor_Sample_Barcode'])
        .size()
        .unstack(fill_value=0)
        .reindex(labels, fill_value=0)
    )
    catalog.index.name = None
    catalog.columns.name = None

    logger.info("Counted %d SNPs across %d samples", len(snvs), catalog.shape[1])
    return catalog


def load_matrix(path) -> pd.DataFrame:
    """Read a labeled numeric matrix, trying tab- then comma-separated formats."""
    for sep in ['\t', ',']:
        try:
            df = pd.read_csv(path, index_col=0, sep=sep)
        except (pd.errors.ParserError, UnicodeDecodeError):
            continue
        if df.shape[1] > 0 and df.select_dtypes(include='number').shape[1] == df.shape[1]:
            return df
    raise ValueError(f"Unable to read {path} as a valid numeric matrix.")


def save_matrix(matrix, output):
    """Write a matrix (or a single-sample Series) as tab-separated text."""
    if isinstance(matrix, pd.Series):
        matrix = matrix.to_frame()
    matrix.to_csv(output, sep='\t')


def save_exposures(exposures, output, sep='\t', pvalues=None, pv_output=None):
    """
    Write exposures with samples in rows.

    Args:
        exposures (DataFrame or Series): Signatures x samples weights.
        output (str): Output file name.
        sep (str): Delimiter, either tab or space.
        pvalues (DataFrame or Series): P-values with the same shape as
            `exposures`. Without `pv_output`, each signature is written as
            alternating `<signature>.observed` and `<signature>.pvalue` columns.
        pv_output (str): Separate file for p-values.
    """
    if sep not in ('\t', ' '):
        raise ValueError("Delimiter must be either space or tab")
    if isinstance(exposures, pd.Series):
        exposures = exposures.to_frame()
    if exposures.size == 0:
        raise ValueError("Exposures are empty")

    expo = exposures.T
    if pvalues is not None:
        if isinstance(pvalues, pd.Series):
            pvalues = pvalues.to_frame()
        pv = pvalues.T
        if pv.shape != expo.shape or not (pv.index.equals(expo.index) and pv.columns.equals(expo.columns)):
            raise ValueError("pvalues must match exposures in shape and labels")

    if pvalues is not None and pv_output is None:
        out = pd.concat(
            [
                pd.concat([expo[sig], pv[sig]], axis=1, keys=[f"{sig}.observed", f"{sig}.pvalue"])
                for sig in expo.columns
            ],
            axis=1,
        )
    else:
        out = expo

    out = out.rename_axis('Sample Name').reset_index()
    out.to_csv(output, sep=sep, index=False)

    if pvalues is not None and pv_output is not None:
        pv.rename_axis('Sample Name').reset_index().to_csv(pv_output, sep=sep, index=False)
