from __future__ import annotations

from gestao.domain.cliente.entities import Cliente
from gestao.domain.cliente.value_objects import Documento, NomeCliente, TipoDocumento
from gestao.domain.record_store import Linha, RecordStore

from .conversao import hidratar_todos, hidratar_um, instante_opcional, texto_opcional

TABELA = "clientes"


class StoreClienteRepo:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, cliente: Cliente) -> Cliente:
        return self._hidratar(self._store.insert(TABELA, self._linha(cliente)))

    def buscar_por_id(self, cliente_id: str) -> Cliente | None:
        return hidratar_um(self._store.get(TABELA, cliente_id), self._hidratar, TABELA)

    def buscar_por_email(self, email: str) -> Cliente | None:
        linhas = self._store.query(TABELA, {"email": email})
        return hidratar_um(linhas[0] if linhas else None, self._hidratar, TABELA)

    def listar(self) -> list[Cliente]:
        return hidratar_todos(self._store.query(TABELA, ordenar_por="criado_em"), self._hidratar, TABELA)

    def salvar(self, cliente: Cliente) -> None:
        self._store.update(TABELA, cliente.id, self._linha(cliente))

    def remover(self, cliente_id: str) -> None:
        self._store.delete(TABELA, cliente_id)

    def _linha(self, cliente: Cliente) -> Linha:
        linha: Linha = {
            "nome": cliente.nome.valor,
            "email": cliente.email,
            "telefone": cliente.telefone,
            "endereco": cliente.endereco,
            "tipo_documento": cliente.tipo_documento.value,
            "documento": cliente.documento.valor if cliente.documento else None,
        }
        if cliente.id:
            linha["id"] = cliente.id
        return linha

    def _hidratar(self, row: Linha) -> Cliente:
        tipo = TipoDocumento(row.get("tipo_documento") or TipoDocumento.CPF)
        documento: Documento | None = None
        bruto = texto_opcional(row.get("documento"))
        if bruto:
            try:
                documento = Documento(tipo, bruto)
            except ValueError:
                documento = None
        return Cliente(
            id=str(row["id"]),
            nome=NomeCliente(str(row["nome"])),
            email=texto_opcional(row.get("email")),
            telefone=texto_opcional(row.get("telefone")),
            endereco=texto_opcional(row.get("endereco")),
            tipo_documento=tipo,
            documento=documento,
            criado_em=instante_opcional(row.get("criado_em")),
        )
