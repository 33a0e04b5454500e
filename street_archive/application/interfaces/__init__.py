"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from street_archive.infrastructure.
"""

from street_archive.application.interfaces.repositories import IStreetRepository

__all__ = ["IStreetRepository"]
