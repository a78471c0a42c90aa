"""Random-walk computations on graphs stored in compressed sparse row form."""

from __future__ import annotations

from typing import Sequence


def pagerank(
    rowptr: Sequence[int],
    rowind: Sequence[int],
    rowval: Sequence[float],
    restart: Sequence[float],
    lamda: float,
    eps: float,
    max_niter: int,
) -> tuple[list[float], int]:
    """Compute (personalized) PageRank scores of the rows of a CSR graph.

    ``restart`` is the restart distribution, one entry per row, and
    ``lamda`` the probability of following an edge rather than restarting.
    Iteration stops once the largest change of a score falls below ``eps``
    or after ``max_niter`` iterations. Returns the scores and the number of
    iterations reported (one more than the index of the last iteration).
    """
    nrows = len(restart)
    if len(rowptr) != nrows + 1:
        raise ValueError(
            f"rowptr has {len(rowptr)} entries, expected {nrows + 1}"
        )

    rscale: list[float] = []
    for start, end in zip(rowptr, rowptr[1:]):
        total = float(sum(rowval[start:end]))
        rscale.append(1.0 / total if total > 0 else total)

    prnew = [float(x) for x in restart]

    iteration = 0
    while iteration < max_niter:
        prold = prnew
        prnew = [0.0] * nrows

        # Mass sitting on sinks is spread according to the restart vector.
        fromsinks = sum(p for p, s in zip(prold, rscale) if s == 0)

        for i, (start, end) in enumerate(zip(rowptr, rowptr[1:])):
            share = prold[i] * rscale[i]
            for j in range(start, end):
                prnew[rowind[j]] += share * rowval[j]

        prnew = [
            lamda * (fromsinks * r + p) + (1.0 - lamda) * r
            for p, r in zip(prnew, restart)
        ]

        error = max((abs(n - o) for n, o in zip(prnew, prold)), default=0.0)
        if error < eps:
            break
        iteration += 1

    return prnew, iteration + 1