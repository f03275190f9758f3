"""Command-line demonstration of accounts, holders and employees."""

from __future__ import annotations

import argparse
from contextlib import ExitStack
from typing import Sequence, TypeVar

from .conta import Conta, ContaCorrente, ContaPoupanca, SaqueError
from .funcionario import Gerente
from .pessoa import CPF, Autenticavel, DiaDaSemana, Titular

T = TypeVar("T")

VALOR_SAQUE = 200


def realizar_saque(conta: Conta) -> float | None:
    """Withdraw a fixed amount, print the outcome and return the new balance."""
    try:
        saldo = conta.sacar(VALOR_SAQUE)
    except SaqueError as erro:
        print(erro)
        return None
    print(f"Novo saldo da conta é: {saldo:g}")
    return saldo


def faz_login(alguem: Autenticavel, senha: str) -> bool:
    """Try to authenticate, print the outcome and return whether it worked."""
    if alguem.autentica(senha):
        print("Login realizado com sucesso")
        return True
    print("Senha inválida")
    return False


def menor(a: T, b: T) -> T:
    """Return ``a`` if it is less than ``b``, otherwise ``b``."""
    return a if a < b else b  # type: ignore[operator]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bancoleilao",
        description="Demonstra contas, titulares e funcionários do banco.",
    )
    parser.parse_args(argv)

    with ExitStack() as contas:
        titular = Titular(CPF("000.000.000-01"), "Victor", "password")

        conta1 = contas.enter_context(ContaCorrente("123456", titular))
        print(f"1 - Conta de {conta1.numero_conta}")
        conta1.depositar(500)
        print(conta1)

        conta2 = contas.enter_context(
            ContaPoupanca("654321", Titular(CPF("000.000.000-02"), "Amanda", "secret"))
        )
        print(f"2 - Conta de {conta2.numero_conta}")
        conta2.depositar(500)
        realizar_saque(conta2)
        print(f"    Saldo: {conta2.saldo:g}")

        conta2 += 100
        print(f"    Saldo: {conta2.saldo:g}")

        print(f"A menor conta é: {menor(conta1, conta2)}\n")

        conta_c3 = contas.enter_context(ContaCorrente("123", titular))
        try:
            conta_c3 += conta1
        except SaqueError as erro:
            print(erro)

        print(f"Saldo ContaC3: {conta_c3.saldo:g}")
        print(f"Saldo Conta1: {conta1.saldo:g}")

        realizar_saque(conta1)

        Gerente(CPF("000.000.000-03"), "Daniela", 4000.0, "placeholder", DiaDaSemana.TERCA)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())