from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Perfil do usuário derivado da flag admin do cadastro."""

    ADMIN = "admin"
    DRIVER = "motorista"


class TripStatus(str, Enum):
    CONFIRMED = "confirmada"

    @classmethod
    def _missing_(cls, value):
        # Viagens aprovadas por correção foram gravadas como "confirmado".
        if isinstance(value, str) and value.strip().lower() == "confirmado":
            return cls.CONFIRMED
        return None


class CorrectionStatus(str, Enum):
    """Estados de uma correção de viagem enviada pelo motorista."""

    PENDING = "pendente"
    APPROVED = "aprovado"
    REJECTED = "reprovado"


class StoppageInclusion(str, Enum):
    """Categoria de crédito de um dia parado."""

    FULL_DAY = "dia parado"
    HALF_DAY = "meio dia parado"
    WORKSHOP_TRIP = "viagem oficina"


class BonusTier(str, Enum):
    GOAL_REACHED = "META_ATINGIDA"
    PARTIAL_90 = "PARCIAL_90"
    PARTIAL_80 = "PARCIAL_80"
    PARTIAL_70 = "PARCIAL_70"
    NOT_REACHED = "NAO_ATINGIDA"


class Direction(str, Enum):
    OUTBOUND = "ida"
    RETURN = "volta"


class WorkPeriod(str, Enum):
    DAY = "diurno"
    NIGHT = "noturno"


class ContactCategory(str, Enum):
    LOGIN_CORRECTION = "correcao_login"
    OTHER = "outros"
