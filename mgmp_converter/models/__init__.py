from .document import DocumentNode, DocumentSerializer
from .record import SourceRecord
from .settings import ConverterSettings

__all__ = [
    "DocumentNode",
    "DocumentSerializer",
    "SourceRecord",
    "ConverterSettings",
]
