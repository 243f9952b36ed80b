"""Port interface for branch persistence."""

from abc import ABC, abstractmethod

from kebabish_geo.domain.entities.branch import Branch


class BranchRepository(ABC):
    @abstractmethod
    async def get_by_id(self, branch_id: str) -> Branch | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Branch]:
        ...

    @abstractmethod
    async def get_active(self) -> list[Branch]:
        ...
