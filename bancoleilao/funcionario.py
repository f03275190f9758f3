"""Bank employees and their bonuses."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .pessoa import CPF, Autenticavel, DiaDaSemana, Pessoa


class Funcionario(Pessoa[CPF], ABC):
    """An employee with a salary and a weekly pay day."""

    def __init__(
        self,
        cpf: CPF,
        nome: str,
        salario: float,
        dia_do_pagamento: DiaDaSemana,
    ) -> None:
        Pessoa.__init__(self, cpf, nome)
        self._salario = salario
        self._dia_do_pagamento = dia_do_pagamento

    @property
    def salario(self) -> float:
        return self._salario

    @property
    def dia_do_pagamento(self) -> DiaDaSemana:
        return self._dia_do_pagamento

    @abstractmethod
    def bonificacao(self) -> float:
        """Return the bonus this employee is owed."""


class Gerente(Funcionario, Autenticavel):
    """A manager: half the salary as bonus, and a password."""

    def __init__(
        self,
        cpf: CPF,
        nome: str,
        salario: float,
        senha: str,
        dia_do_pagamento: DiaDaSemana,
    ) -> None:
        Funcionario.__init__(self, cpf, nome, salario, dia_do_pagamento)
        Autenticavel.__init__(self, senha)

    def bonificacao(self) -> float:
        return self.salario * 0.5


class Caixa(Funcionario):
    """A cashier: a tenth of the salary as bonus."""

    def bonificacao(self) -> float:
        return self.salario * 0.1