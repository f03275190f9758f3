"""People, identity documents and password authentication."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, TypeVar

TAMANHO_MINIMO_NOME = 5

D = TypeVar("D")


class NomeCurtoError(ValueError):
    """Raised when a person's name is shorter than the minimum length."""


class DiaDaSemana(IntEnum):
    """Day of the week, numbered from Sunday."""

    DOMINGO = 0
    SEGUNDA = 1
    TERCA = 2
    QUARTA = 3
    QUINTA = 4
    SEXTA = 5
    SABADO = 6


@dataclass(frozen=True)
class CPF:
    """A Brazilian taxpayer document number, kept as text."""

    cpf: str

    def __str__(self) -> str:
        return self.cpf


class Autenticavel:
    """Something that can be authenticated with a password."""

    def __init__(self, senha: str) -> None:
        self._senha = senha

    def autentica(self, senha: str) -> bool:
        """Return True when ``senha`` matches the stored password."""
        return senha == self._senha


class Pessoa(Generic[D]):
    """A named person identified by a document."""

    def __init__(self, documento: D, nome: str) -> None:
        if len(nome) < TAMANHO_MINIMO_NOME:
            raise NomeCurtoError("Nome muito curto.")
        self._documento = documento
        self._nome = nome

    @property
    def nome(self) -> str:
        return self._nome

    @property
    def documento(self) -> D:
        return self._documento


class Titular(Pessoa[CPF], Autenticavel):
    """An account holder, identified by CPF and protected by a password."""

    def __init__(self, cpf: CPF, nome: str, senha: str) -> None:
        Pessoa.__init__(self, cpf, nome)
        Autenticavel.__init__(self, senha)