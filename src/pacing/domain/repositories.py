from abc import ABC, abstractmethod
from typing import List, Optional

from pacing.domain.models.player import Player


class PlayerRepository(ABC):
    @abstractmethod
    def get(self, name: str) -> Optional[Player]:
        raise NotImplementedError

    @abstractmethod
    def list_names(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def save(self, player: Player) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, name: str) -> bool:
        raise NotImplementedError

    def exists(self, name: str) -> bool:
        return name in self.list_names()
