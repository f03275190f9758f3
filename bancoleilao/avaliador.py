"""Evaluation of an auction's bids."""

from __future__ import annotations

from .leilao import Lance, Leilao

_INT64_MIN = float(-(2**63))
_INT64_MAX = float(2**63 - 1)


class Avaliador:
    """Tracks the highest and lowest bid values and the top three bids.

    The highest and lowest values carry over between calls to
    :meth:`avalia`; the top three bids reflect only the last auction.
    """

    def __init__(self) -> None:
        self._maior_valor = _INT64_MIN
        self._menor_valor = _INT64_MAX
        self._maiores_3_lances: list[Lance] = []

    def avalia(self, leilao: Leilao) -> None:
        """Evaluate the bids of ``leilao``."""
        lances = leilao.lances
        for lance in lances:
            self._maior_valor = max(self._maior_valor, lance.valor)
            self._menor_valor = min(self._menor_valor, lance.valor)
        ordenados = sorted(lances, key=lambda lance: lance.valor, reverse=True)
        self._maiores_3_lances = ordenados[:3]

    @property
    def maior_valor(self) -> float:
        return self._maior_valor

    @property
    def menor_valor(self) -> float:
        return self._menor_valor

    @property
    def maiores_3_lances(self) -> list[Lance]:
        """Return up to three bids, highest value first."""
        return list(self._maiores_3_lances)