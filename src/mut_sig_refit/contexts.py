"""Mutation context labels for single- and doublet-base substitutions."""

_COMPLEMENT = {'A': 'T', 'C': 'G', 'G': 'C', 'T': 'A'}

# source doublets in the strand-collapsed DBS78 convention
_DBS_SOURCES = ['AC', 'AT', 'CC', 'CG', 'CT', 'GC', 'TA', 'TC', 'TG', 'TT']
# palindromic sources whose labels are written on the reverse strand
_DBS_REVERSED = {'CG', 'TA'}


def complement(nt: str) -> str:
    try:
        return _COMPLEMENT[nt]
    except KeyError:
        raise ValueError(f"Unknown nucleotide: {nt!r}") from None


def reverse_complement(seq: str) -> str:
    return ''.join(complement(nt) for nt in reversed(seq))


def trinucleotides(nt='ACGT', brackets=True, arrows=True):
    """
    Trinucleotide substitution labels with a pyrimidine reference base.

    With the defaults, the 96 labels in COSMIC order:
    A[C>A]A, A[C>A]C, ..., T[T>G]T.
    """
    pyrimidines = [b for b in nt if b in ('C', 'T')]
    sep = '>' if arrows else ''
    left, right = ('[', ']') if brackets else ('', '')

    labels = []
    for ref in pyrimidines:
        for alt in nt:
            if alt == ref:
                continue
            for five in nt:
                for three in nt:
                    labels.append(f"{five}{left}{ref}{sep}{alt}{right}{three}")
    return labels


def dinucleotides(nt='ACGT'):
    """Doublet-base substitution labels collapsed over strands (78 with the defaults)."""
    labels = []
    for src in _DBS_SOURCES:
        for x in nt:
            if x == src[0]:
                continue
            for y in nt:
                if y == src[1]:
                    continue
                label = f"{src}>{x}{y}"
                reverse = f"{reverse_complement(src)}>{reverse_complement(x + y)}"
                if label in labels or reverse in labels:
                    continue
                labels.append(reverse if src in _DBS_REVERSED else label)
    return labels
