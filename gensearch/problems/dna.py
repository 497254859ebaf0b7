# gensearch/problems/dna.py
# Codon lookup in a gene string: exercises linear_contains and binary_contains.
from __future__ import annotations
from enum import IntEnum
from typing import List, Tuple

from ..core.containment import binary_contains, linear_contains


class Nucleotide(IntEnum):
    A = 0
    C = 1
    G = 2
    T = 3


Codon = Tuple[Nucleotide, Nucleotide, Nucleotide]
Gene = List[Codon]

GENE_STR = "ACGTGGCTCTCTAACGTACGTACGTACGGGGTTTATATATACCCTAGGACTCCCTTT"


def string_to_codon(s: str) -> Codon:
    try:
        n1, n2, n3 = (Nucleotide[ch] for ch in s)
    except KeyError as e:
        raise ValueError(f"invalid nucleotide {e.args[0]!r} in {s!r}") from e
    return (n1, n2, n3)


def string_to_gene(s: str) -> Gene:
    """Splits s into codons; a trailing partial codon is dropped."""
    gene: Gene = []
    for i in range(0, len(s) - 2, 3):
        gene.append(string_to_codon(s[i:i + 3]))
    return gene


def main():
    my_gene = string_to_gene(GENE_STR)
    acg = string_to_codon("ACG")
    gat = string_to_codon("GAT")

    print(linear_contains(my_gene, acg))  # True
    print(linear_contains(my_gene, gat))  # False

    my_sorted_gene = sorted(my_gene)
    print(binary_contains(my_sorted_gene, acg))  # True
    print(binary_contains(my_sorted_gene, gat))  # False


if __name__ == "__main__":
    main()
