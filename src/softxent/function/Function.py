from abc import ABC, abstractmethod


class Function(ABC):
    # registry names, canonical name first
    names: tuple[str, ...] = ()

    @staticmethod
    @abstractmethod
    def apply(*args, **kwargs):
        pass

    @staticmethod
    @abstractmethod
    def derivative(*args, **kwargs):
        pass

    @property
    def name(self) -> str:
        return self.names[0] if self.names else self.__class__.__name__.lower()

    def __call__(self, *args, **kwargs):
        return self.__class__.apply(*args, **kwargs)

    def __repr__(self):
        return f"{self.__class__.__name__}()"
