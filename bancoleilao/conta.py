"""Bank accounts: checking and savings, with withdrawal fees."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .pessoa import Titular


class SaqueError(Exception):
    """Base class for a refused account operation."""


class ValorNegativoError(SaqueError, ValueError):
    """Raised when an operation is given a negative amount."""

    def __init__(self, mensagem: str = "Não pode sacar valor negativo.") -> None:
        super().__init__(mensagem)


class SaldoInsuficienteError(SaqueError):
    """Raised when a withdrawal exceeds the balance."""

    def __init__(self, mensagem: str = "Saldo insuficiente.") -> None:
        super().__init__(mensagem)


class Conta(ABC):
    """An account owned by a holder, charging a fee on withdrawals."""

    _numero_de_contas = 0

    def __init__(self, numero_conta: str, titular: Titular) -> None:
        self._numero_conta = numero_conta
        self._titular = titular
        self._saldo = 0.0
        self._fechada = False
        Conta._numero_de_contas += 1

    @staticmethod
    def recupera_numero_de_contas() -> int:
        """Return how many accounts are currently open."""
        return Conta._numero_de_contas

    def close(self) -> None:
        """Close the account, removing it from the open-account count."""
        if not self._fechada:
            self._fechada = True
            Conta._numero_de_contas -= 1

    def __enter__(self) -> Conta:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @abstractmethod
    def taxa_de_saque(self) -> float:
        """Return the withdrawal fee as a fraction of the amount."""

    def sacar(self, valor: float) -> float:
        """Withdraw ``valor`` plus the fee and return the new balance."""
        if valor < 0:
            raise ValorNegativoError()
        valor_do_saque = valor + valor * self.taxa_de_saque()
        if valor > self._saldo:
            raise SaldoInsuficienteError()
        self._saldo -= valor_do_saque
        return self._saldo

    def depositar(self, valor: float) -> None:
        """Add ``valor`` to the balance."""
        if valor < 0:
            raise ValorNegativoError()
        self._saldo += valor

    def __iadd__(self, valor: float) -> Conta:
        self.depositar(valor)
        return self

    def __lt__(self, outra: object) -> bool:
        if not isinstance(outra, Conta):
            return NotImplemented
        return self._saldo < outra._saldo

    @property
    def saldo(self) -> float:
        return self._saldo

    @property
    def numero_conta(self) -> str:
        return self._numero_conta

    @property
    def titular(self) -> Titular:
        return self._titular

    def __str__(self) -> str:
        return f"{self._titular.nome}, seu saldo é de: {self._saldo:g}"


class ContaCorrente(Conta):
    """A checking account: 5% withdrawal fee, supports transfers."""

    def taxa_de_saque(self) -> float:
        return 0.05

    def transfere_para(self, destino: Conta, valor: float) -> None:
        """Run a transfer of ``valor`` against ``destino``.

        The amount is withdrawn from ``destino`` and then deposited back
        into it, so ``destino`` is charged its withdrawal fee and this
        account is left untouched.
        """
        destino.sacar(valor)
        destino.depositar(valor)

    def __iadd__(self, outro: ContaCorrente | float) -> ContaCorrente:
        if isinstance(outro, ContaCorrente):
            outro.transfere_para(self, outro.saldo / 2)
            return self
        self.depositar(outro)
        return self


class ContaPoupanca(Conta):
    """A savings account: 3% withdrawal fee."""

    def taxa_de_saque(self) -> float:
        return 0.03