"""
Naive singular/plural expansion of search keywords.

The index stores labels as exact terms, so "cats" would never match a photo
labelled "cat". Each keyword is widened with heuristic variants. The rules
are deliberately crude ("bus" also yields "bu"); changing them changes
which indexed photos a query can reach.
"""

from typing import Iterable, List

from photoindex.domain.labels import merge_unique


def expand_token(token: str) -> List[str]:
    variants = [token]

    # plural forms
    if not token.endswith("s"):
        if token.endswith("y") and len(token) > 1:
            variants.append(token[:-1] + "ies")
        variants.append(token + "s")

    # singular forms
    if len(token) > 3:
        if token.endswith("ies"):
            variants.append(token[:-3] + "y")
        elif token.endswith("es"):
            variants.append(token[:-2])
        elif token.endswith("s"):
            variants.append(token[:-1])

    return variants


def expand_keywords(keywords: Iterable[str]) -> List[str]:
    """Return the keywords plus every generated variant, without duplicates."""
    return merge_unique(*(expand_token(k) for k in keywords))
