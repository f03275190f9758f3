"""Auctions: users, bids and the auction that collects them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Usuario:
    """A user taking part in auctions."""

    nome: str

    @property
    def primeiro_nome(self) -> str:
        """Return the name up to the first space."""
        return self.nome.partition(" ")[0]


@dataclass(frozen=True)
class Lance:
    """A bid of ``valor`` placed by ``usuario``."""

    usuario: Usuario
    valor: float

    @property
    def nome_usuario(self) -> str:
        return self.usuario.nome


class Leilao:
    """An auction that refuses consecutive bids from the same user."""

    def __init__(self, descricao: str) -> None:
        self.descricao = descricao
        self._lances: list[Lance] = []

    @property
    def lances(self) -> list[Lance]:
        """Return the accepted bids, in the order they were received."""
        return list(self._lances)

    def recebe_lance(self, lance: Lance) -> None:
        """Accept ``lance`` unless the previous bid came from the same user."""
        if not self._lances or self._lances[-1].nome_usuario != lance.nome_usuario:
            self._lances.append(lance)