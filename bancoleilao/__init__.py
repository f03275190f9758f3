"""Domain models for a small bank and an auction with a bid evaluator."""

__version__ = "0.1.0"
__all__ = ["pessoa", "funcionario", "conta", "cli", "leilao", "avaliador"]