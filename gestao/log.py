# gestao/log.py
#
# Logger compartilhado do servico.
#
# Design decisions:
#   - Uma unica funcao log() em vez de um logger por modulo.
#   - Linha com horario local e nivel, para o operador correlacionar com o
#     horario da requisicao.
#   - Sem dependencias externas: stdout com flush para visibilidade imediata.
#   - Thread-safe: sys.stdout.write de uma unica string e atomico no CPython.
from __future__ import annotations

import sys
from datetime import datetime


def log(message: str, nivel: str = "INFO") -> None:
    """Escreve uma linha com horario no stdout."""
    agora = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    sys.stdout.write(f"[gestao {agora}] {nivel} {message}\n")
    sys.stdout.flush()
