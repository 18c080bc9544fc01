import abc
from typing import Optional

from user_management.domain.base import IDomain


class IRepository(abc.ABC):
    @abc.abstractmethod
    def add(self, data: IDomain) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, object_id: int) -> Optional[IDomain]:
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, data: IDomain) -> None:
        raise NotImplementedError
