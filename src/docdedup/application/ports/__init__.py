"""Application ports - interfaces for external adapters."""

from docdedup.application.ports.event_sink import EventSink
from docdedup.application.ports.fingerprinter import Fingerprinter
from docdedup.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "EventSink",
    "Fingerprinter",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
