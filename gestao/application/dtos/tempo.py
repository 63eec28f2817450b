from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator


def para_horario_local(valor: datetime) -> datetime:
    """Datas com fuso viram horario local sem fuso, como o banco guarda."""
    if valor.tzinfo is None:
        return valor
    return valor.astimezone().replace(tzinfo=None)


InstanteLocal = Annotated[datetime, AfterValidator(para_horario_local)]
