"""Domain layer: rank catalog, advancement records and the workflow rules.

Nothing in this package performs I/O. Persistence goes through the ports
in troop_advancement.application.ports.
"""

from troop_advancement.domain.exceptions import AdvancementError

__all__: list[str] = ["AdvancementError"]
