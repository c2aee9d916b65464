"""Application interfaces (ports): repository and storage protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from filekeeper.infrastructure.
"""

from filekeeper.application.interfaces.repositories import IFileRecordRepository
from filekeeper.application.interfaces.storage import IStorageService

__all__ = [
    "IFileRecordRepository",
    "IStorageService",
]
