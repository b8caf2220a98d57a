from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from warehouse_lookup.utils.constants import ZONE_LABELS


class Zone(str, Enum):
    """Zonas físicas del almacén. UNKNOWN agrupa cualquier texto no reconocido."""
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'
    UNKNOWN = 'UNKNOWN'

    @classmethod
    def parse(cls, raw):
        text = str(raw or '').strip().upper()
        if text in ZONE_LABELS:
            return cls(text)
        return cls.UNKNOWN

    @property
    def label(self):
        return ZONE_LABELS.get(self.value, 'Sin zona')


@dataclass(frozen=True)
class Product:
    """Una fila normalizada del inventario.

    quantity y zone solo existen en el perfil con zonas; extra solo en el
    perfil extendido (columnas originales no reconocidas, tal cual).
    """
    identifier: str
    article: str
    name: str
    cell: str
    quantity: Optional[Union[int, float]] = None
    zone: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def zone_known(self):
        return self.zone is not None and Zone.parse(self.zone) is not Zone.UNKNOWN


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    severity: str = 'success'

    def to_dict(self):
        return {
            'title': self.title,
            'description': self.description,
            'severity': self.severity,
        }
