"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Meta mensal de produção (R$) usada na premiação.
META_FIXA = 677.86

# Premiação por faixa de atingimento da meta.
OVER_GOAL_MULTIPLIER = 1.5
PARTIAL_TIERS = (
    (0.9, 0.45),
    (0.8, 0.40),
    (0.7, 0.35),
)

# Dia parado
WORKDAYS_PER_MONTH = 22
FULL_DAY_STOP_MINUTES = 360
WORKSHOP_TRIP_THRESHOLD = 2
WORKSHOP_CREDIT = 7.71

# Período de apuração: do dia 21 do mês anterior ao dia 20 do mês selecionado.
PERIOD_START_DAY = 21
PERIOD_END_DAY = 20

DEFAULT_SESSION_DAYS = 7
CORRECTIONS_PAGE_SIZE = 10
DEFAULT_LIST_LIMIT = 500
MIN_PASSWORD_LENGTH = 6
