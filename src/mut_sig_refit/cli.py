import logging
import os

import click

from .extract import load_matrix, maf_to_catalog, save_matrix
from .refitting import mutational_cone
from .similarity import cosine_similarity


@click.group()
@click.option('--verbose', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """Mutational signature refitting tool."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def _load(path):
    if not os.path.exists(path):
        raise click.ClickException(f"File does not exist: {path}")
    try:
        return load_matrix(path)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option('--maf', required=True, help='Input MAF file with a Ref_Tri column')
@click.option('--out', 'out_matrix', required=True, help='Output catalog matrix file')
def catalog(maf, out_matrix):
    """Build a trinucleotide mutation catalog from a MAF file."""

    if not os.path.exists(maf):
        raise click.ClickException(f"MAF file does not exist: {maf}")

    click.echo(f"Counting trinucleotide contexts in: {maf}")
    try:
        counts_df = maf_to_catalog(maf)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if counts_df.empty:
        click.echo("No SNPs with trinucleotide context found; no catalog written.")
        return

    save_matrix(counts_df, out_matrix)
    click.echo(f"Catalog saved to: {out_matrix}")
    click.echo(f"Matrix shape: {counts_df.shape}")


@cli.command()
@click.option('--catalog', 'catalog_file', required=True, help='Input catalog matrix file')
@click.option('--signatures', required=True, help='Reference signature matrix file')
@click.option('--out', 'out_file', required=True, help='Output exposure matrix file')
@click.option('--normalize', is_flag=True, help='Normalize exposures of each sample to sum to one')
@click.option('--n-jobs', default=1, help='Number of parallel workers over samples')
def refit(catalog_file, signatures, out_file, normalize, n_jobs):
    """Refit catalog samples onto reference signatures."""

    counts_df = _load(catalog_file)
    signatures_df = _load(signatures)

    click.echo(f"Refitting {counts_df.shape[1]} samples onto {signatures_df.shape[1]} signatures")
    try:
        weights = mutational_cone(counts_df, signatures_df, normalize=normalize, n_jobs=n_jobs)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    save_matrix(weights, out_file)
    click.echo(f"Exposures saved to: {out_file}")


@cli.command()
@click.option('--a', 'a_file', required=True, help='Test matrix file')
@click.option('--b', 'b_file', required=True, help='Reference matrix file')
@click.option('--out', 'out_file', required=True, help='Output similarity file')
@click.option('--diag', is_flag=True, help='Only compare matching column positions')
def similarity(a_file, b_file, out_file, diag):
    """Cosine similarity between columns of two matrices."""

    a_df = _load(a_file)
    b_df = _load(b_file)
    try:
        cos = cosine_similarity(a_df, b_df, diag=diag)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if diag:
        cos = cos.rename('cosine_similarity')
    save_matrix(cos, out_file)
    click.echo(f"Cosine similarities saved to: {out_file}")


if __name__ == '__main__':
    cli()
