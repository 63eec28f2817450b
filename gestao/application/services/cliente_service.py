from __future__ import annotations

from dataclasses import replace

from gestao.domain.cliente.entities import Cliente
from gestao.domain.cliente.repository import ClienteRepository, ConsultaCep
from gestao.domain.cliente.value_objects import Documento, Endereco, NomeCliente, TipoDocumento
from gestao.domain.erros import ErroConsultaExterna, RegistroDuplicado

EMAIL_DUPLICADO = "Este email ja esta cadastrado no sistema"


def _email(valor: str | None) -> str | None:
    if valor is None:
        return None
    limpo = valor.strip().lower()
    return limpo or None


def _documento(tipo: TipoDocumento, raw: str | None) -> Documento | None:
    """Documento em branco e ausente; preenchido precisa ter digitos verificadores validos."""
    if raw is None or not raw.strip():
        return None
    return Documento(tipo, raw)


class ClienteService:
    def __init__(self, repo: ClienteRepository, cep: ConsultaCep | None = None) -> None:
        self._repo = repo
        self._cep = cep

    def criar(
        self,
        nome: str,
        email: str | None = None,
        telefone: str | None = None,
        endereco: str | None = None,
        tipo_documento: TipoDocumento = TipoDocumento.CPF,
        documento: str | None = None,
    ) -> Cliente:
        cliente = Cliente(
            id="",
            nome=NomeCliente(nome),
            email=_email(email),
            telefone=telefone,
            endereco=endereco,
            tipo_documento=tipo_documento,
            documento=_documento(tipo_documento, documento),
        )
        self._garantir_email_unico(cliente.email, None)
        return self._repo.adicionar(cliente)

    def atualizar(
        self,
        cliente_id: str,
        nome: str | None = None,
        email: str | None = None,
        telefone: str | None = None,
        endereco: str | None = None,
        tipo_documento: TipoDocumento | None = None,
        documento: str | None = None,
    ) -> Cliente | None:
        atual = self._repo.buscar_por_id(cliente_id)
        if atual is None:
            return None

        tipo = tipo_documento or atual.tipo_documento
        if documento is not None:
            novo_documento = _documento(tipo, documento)
        elif atual.documento is not None and atual.documento.tipo != tipo:
            novo_documento = None
        else:
            novo_documento = atual.documento

        novo = replace(
            atual,
            nome=NomeCliente(nome) if nome is not None else atual.nome,
            email=_email(email) if email is not None else atual.email,
            telefone=telefone if telefone is not None else atual.telefone,
            endereco=endereco if endereco is not None else atual.endereco,
            tipo_documento=tipo,
            documento=novo_documento,
        )
        self._garantir_email_unico(novo.email, cliente_id)
        self._repo.salvar(novo)
        return self._repo.buscar_por_id(cliente_id)

    def buscar(self, cliente_id: str) -> Cliente | None:
        return self._repo.buscar_por_id(cliente_id)

    def listar(self) -> list[Cliente]:
        return self._repo.listar()

    def remover(self, cliente_id: str) -> None:
        self._repo.remover(cliente_id)

    def buscar_cep(self, cep: str) -> Endereco | None:
        if self._cep is None:
            raise ErroConsultaExterna("Consulta de CEP nao configurada")
        return self._cep.buscar(cep)

    def _garantir_email_unico(self, email: str | None, cliente_id: str | None) -> None:
        if email is None:
            return
        existente = self._repo.buscar_por_email(email)
        if existente is not None and existente.id != cliente_id:
            raise RegistroDuplicado(EMAIL_DUPLICADO, "clientes")
