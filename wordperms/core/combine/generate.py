from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from functools import partial, reduce
from itertools import combinations, permutations, product
from typing import Iterable, Optional, Sequence

from wordperms.core.model import Capitalization
from wordperms.core.variants.expand_variants import expand_variants, variant_count


def expand_combination(combo: Sequence[str], policy: Capitalization) -> set[str]:
    """Local result set for one combination.

    Cross product of each word's variants, then every ordering of each
    candidate tuple, concatenated without a separator.
    """
    local: set[str] = set()
    variants_per_word = [expand_variants(w, policy) for w in combo]
    for candidate in product(*variants_per_word):
        for perm in permutations(candidate):
            local.add("".join(perm))
    return local


def merge_results(acc: set[str], local: set[str]) -> set[str]:
    acc |= local
    return acc


def generate(
    words: Sequence[str],
    max_len: int,
    policy: Capitalization,
    *,
    workers: int = 4,
) -> set[str]:
    """Return every distinct permutation string reachable from `words`.

    max_len is clamped to len(words); max_len <= 0 or an empty word list
    yields an empty set.
    """
    k_max = min(max_len, len(words))
    if k_max <= 0:
        return set()

    expand = partial(expand_combination, policy=policy)
    results: set[str] = set()
    with ThreadPoolExecutor(max_workers=max(1, workers)) as ex:
        for k in range(1, k_max + 1):
            per_k = reduce(merge_results, ex.map(expand, combinations(words, k)), set())
            results = merge_results(results, per_k)
    return results


def truncate(results: Iterable[str], limit: Optional[int], *, sort: bool = False) -> list[str]:
    """Materialize results as a list, optionally sorted, cut to `limit` entries.

    Without sort the order is set iteration order, which is arbitrary.
    """
    out = sorted(results) if sort else list(results)
    if limit is not None and limit < len(out):
        del out[max(0, limit):]
    return out


def estimate_count(word_count: int, max_len: int, policy: Capitalization) -> int:
    """Worst-case number of candidate strings before deduplication.

    sum over k of C(n, k) * k! * v**k, v being the variants per word.
    """
    k_max = min(max_len, word_count)
    v = variant_count(policy)
    return sum(math.perm(word_count, k) * v**k for k in range(1, k_max + 1))
