"""
Reductions over projected time indices.

Commutation sums (N, M) and the inner sums of insurance and annuity values
are folds of ``+`` over an ordered, finite range of times. Short spans are
summed sequentially; spans of at least ``parallel_threshold`` indices are
split into chunks, summed in a ``concurrent.futures`` executor, and combined
in chunk order.

Terms summed in a process pool must be picklable: module-level functions or
``functools.partial`` objects wrapping them.
"""

import logging
from collections.abc import Callable
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor

import numpy as np

from life_contingencies.config.settings import SETTINGS, ReductionConfig

logger = logging.getLogger(__name__)

Term = Callable[..., float]


def _chunk_sum(term: Term, lc: object, indices: range) -> float:
    return sum(term(lc, t) for t in indices)


def _make_executor(config: ReductionConfig) -> Executor:
    if config.executor == "thread":
        return ThreadPoolExecutor(max_workers=config.n_workers)
    return ProcessPoolExecutor(max_workers=config.n_workers)


def fold_sum(
    term: Term,
    lc: object,
    indices: range,
    config: ReductionConfig | None = None,
) -> float:
    """
    Sum ``term(lc, t)`` over ``indices``.

    Parameters
    ----------
    term : callable
        Function of (life contingency, time) returning a float
    lc : LifeContingency
        Passed through to ``term``
    indices : range
        Ordered time indices
    config : ReductionConfig, optional
        Defaults to ``SETTINGS.reduction``

    Returns
    -------
    float
        The sum; 0.0 for an empty range

    Examples
    --------
    >>> fold_sum(lambda lc, t: float(t), None, range(4))
    6.0
    """
    config = config or SETTINGS.reduction
    n = len(indices)
    if n == 0:
        return 0.0

    if not config.parallel or n < config.parallel_threshold:
        return float(_chunk_sum(term, lc, indices))

    chunks = [indices[i:i + config.chunk_size] for i in range(0, n, config.chunk_size)]
    logger.debug(
        f"Parallel reduction of {n} terms in {len(chunks)} chunks "
        f"({config.executor} executor)"
    )
    with _make_executor(config) as executor:
        futures = [executor.submit(_chunk_sum, term, lc, chunk) for chunk in chunks]
        # Combine in chunk order so results do not depend on completion order
        partials = [future.result() for future in futures]
    return float(sum(partials))


def ratio(numerator: float, denominator: float, description: str) -> float:
    """
    Divide, returning a non-finite float instead of raising on zero.

    [T1] x / 0 = ±inf, 0 / 0 = nan (IEEE 754)

    Parameters
    ----------
    numerator : float
        Dividend
    denominator : float
        Divisor
    description : str
        Name of the quantity, for the degenerate-result warning

    Returns
    -------
    float
        The quotient, possibly ``inf``/``nan``
    """
    if denominator == 0:
        logger.warning(f"Degenerate {description}: zero denominator, result is non-finite")
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
