# bancoleilao

Two small domain models:

- **Banco** (`bancoleilao.pessoa`, `bancoleilao.conta`, `bancoleilao.funcionario`):
  account holders identified by a CPF, checking and savings accounts with
  withdrawal fees, and employees (managers and cashiers) with bonuses.
- **Leilão** (`bancoleilao.leilao`, `bancoleilao.avaliador`): users place bids
  on an auction, and an evaluator reports the highest bid value, the lowest bid
  value and the top three bids.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Banco

```python
from bancoleilao.pessoa import CPF, Titular, DiaDaSemana
from bancoleilao.conta import ContaCorrente, ContaPoupanca, SaldoInsuficienteError
from bancoleilao.funcionario import Gerente, Caixa

titular = Titular(CPF("cpf-exemplo"), "Victor", "password")
titular.autentica("password")   # True
titular.nome                    # "Victor"

corrente = ContaCorrente("conta-a", titular)
corrente.depositar(500)
corrente += 100                 # same as depositar(100)

poupanca = ContaPoupanca("conta-b", titular)
poupanca.depositar(500)
poupanca.sacar(200)             # returns the new balance: 500 - 200 - 3% fee = 294

try:
    corrente.sacar(10_000)
except SaldoInsuficienteError:
    ...

print(corrente)                 # "Victor, seu saldo é de: 600"
```

### People (`bancoleilao.pessoa`)

- `CPF` holds the document number as text.
- `Pessoa` has a `documento` and a `nome`. A name shorter than five characters
  is rejected with `NomeCurtoError` (a `ValueError`).
- `Autenticavel.autentica(senha)` returns whether the password matches.
- `Titular(cpf, nome, senha)` is both a `Pessoa` and an `Autenticavel`.
- `DiaDaSemana` numbers the days of the week from `DOMINGO` (0) to `SABADO` (6).

### Accounts (`bancoleilao.conta`)

- `Conta` is abstract; `ContaCorrente` charges a 5% withdrawal fee and
  `ContaPoupanca` 3% (`taxa_de_saque()`).
- `sacar(valor)` takes the amount plus the fee from the balance and returns the
  new balance. A negative amount raises `ValorNegativoError`; an amount greater
  than the balance raises `SaldoInsuficienteError`. Both derive from
  `SaqueError`. The balance check compares the amount without the fee, so a
  withdrawal close to the balance can leave it slightly negative.
- `depositar(valor)` adds to the balance and raises `ValorNegativoError` for a
  negative amount. `conta += valor` deposits.
- Accounts compare by balance with `<`.
- `Conta.recupera_numero_de_contas()` gives the number of accounts currently
  open. `close()`, or leaving a `with` block on the account, takes it off that
  count (only once).
- `ContaCorrente.transfere_para(destino, valor)` withdraws `valor` from
  `destino` and deposits it back there: `destino` pays its withdrawal fee and
  the calling account is not changed. `corrente += outra_corrente` calls
  `outra_corrente.transfere_para(corrente, outra_corrente.saldo / 2)`.

### Employees (`bancoleilao.funcionario`)

`Funcionario` is abstract, with `salario`, `dia_do_pagamento` and
`bonificacao()`. `Gerente(cpf, nome, salario, senha, dia_do_pagamento)` earns a
bonus of 50% of the salary and can be authenticated; `Caixa(cpf, nome, salario,
dia_do_pagamento)` earns 10%.

### Demonstration

The package installs a command that runs a fixed walk-through of the bank model
and prints balances as it goes:

```
bancoleilao-banco
```

It takes no options besides `--help`. The helpers it uses are available from
`bancoleilao.cli`: `realizar_saque(conta)` withdraws 200 and prints the result,
`faz_login(alguem, senha)` prints whether the login worked, and `menor(a, b)`
returns the lesser of two values.

## Leilão

```python
from bancoleilao.leilao import Usuario, Lance, Leilao
from bancoleilao.avaliador import Avaliador

leilao = Leilao("Ford Ka 1.0 2013")
leilao.recebe_lance(Lance(Usuario("Victor Santos"), 1000))
leilao.recebe_lance(Lance(Usuario("Amanda Correia"), 2000))

avaliador = Avaliador()
avaliador.avalia(leilao)
avaliador.maior_valor        # 2000
avaliador.menor_valor        # 1000
avaliador.maiores_3_lances   # bids in descending order of value, at most three
```

- `Usuario.primeiro_nome` is the name up to the first space.
- `Leilao.recebe_lance` ignores a bid that comes straight after another bid
  from a user with the same name. `Leilao.lances` returns a copy of the accepted
  bids in the order received.
- `Avaliador` keeps its highest and lowest values across calls to `avalia`;
  `maiores_3_lances` reflects only the last auction evaluated.

## What the package does not do

Nothing is stored: accounts, holders and auctions live only in memory. The only
command is the fixed bank walk-through; there is no interactive interface and no
command for the auction model.