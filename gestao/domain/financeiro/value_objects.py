from enum import StrEnum


class TipoTransacao(StrEnum):
    ENTRADA = "entrada"
    SAIDA = "saida"


# Categorias predefinidas. Texto livre tambem e aceito.
CATEGORIAS: dict[TipoTransacao, tuple[str, ...]] = {
    TipoTransacao.ENTRADA: (
        "Vendas",
        "Servicos",
        "Comissoes Recebidas",
        "Juros Recebidos",
        "Outras Receitas",
    ),
    TipoTransacao.SAIDA: (
        "Fornecedores",
        "Salarios",
        "Comissoes Pagas",
        "Aluguel",
        "Energia Eletrica",
        "Telefone/Internet",
        "Combustivel",
        "Manutencao",
        "Marketing",
        "Impostos",
        "Outras Despesas",
    ),
}

FORMAS_PAGAMENTO: tuple[str, ...] = (
    "Dinheiro",
    "Cartao de Credito",
    "Cartao de Debito",
    "PIX",
    "Transferencia Bancaria",
    "Cheque",
    "Boleto",
)

CATEGORIA_VENDAS = "Vendas"
REFERENCIA_VENDA = "sale"
