"""Frota Premiação package.

Feature modules (drivers, trips, stoppages, fuel, bonus, logbook, ...) each
carry a model, a repository protocol with its MySQL implementation, a service
layer and a thin Flask controller.
"""

__version__ = "1.0.0"
