import pytest

from bancoleilao.funcionario import Caixa, Funcionario, Gerente
from bancoleilao.pessoa import CPF, DiaDaSemana, NomeCurtoError


def _gerente(salario=4000.0):
    return Gerente(CPF("cpf-exemplo"), "Daniela", salario, "password", DiaDaSemana.TERCA)


def _caixa(salario=1000.0):
    return Caixa(CPF("cpf-exemplo"), "Roberto", salario, DiaDaSemana.SEXTA)


def test_funcionario_is_abstract():
    with pytest.raises(TypeError):
        Funcionario(CPF("cpf-exemplo"), "Daniela", 1000.0, DiaDaSemana.SEGUNDA)


def test_gerente_bonus_is_half_salary():
    assert _gerente(4000.0).bonificacao() == pytest.approx(2000.0)


def test_caixa_bonus_is_tenth_of_salary():
    assert _caixa(1000.0).bonificacao() == pytest.approx(100.0)


def test_gerente_bonus_exceeds_caixa_bonus_for_same_salary():
    assert _gerente(3000.0).bonificacao() > _caixa(3000.0).bonificacao()


def test_zero_salary_gives_zero_bonus():
    assert _gerente(0.0).bonificacao() == 0
    assert _caixa(0.0).bonificacao() == 0


def test_employee_properties():
    gerente = _gerente(4000.0)
    assert gerente.nome == "Daniela"
    assert gerente.salario == 4000.0
    assert gerente.dia_do_pagamento is DiaDaSemana.TERCA
    assert gerente.documento == CPF("cpf-exemplo")


def test_gerente_authenticates():
    gerente = _gerente()
    assert gerente.autentica("password")
    assert not gerente.autentica("secret")


def test_employee_short_name_raises():
    with pytest.raises(NomeCurtoError):
        Caixa(CPF("cpf-exemplo"), "Bia", 1000.0, DiaDaSemana.SEGUNDA)