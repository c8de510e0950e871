"""
Base class every plugin extends.
"""
from abc import ABC, abstractmethod


class Plugin(ABC):
    """
    A pluggable feature. Subclasses provide the identity methods and
    ``boot``; the lifecycle methods default to doing nothing.
    """

    @abstractmethod
    def get_name(self):
        ...

    @abstractmethod
    def get_version(self):
        ...

    @abstractmethod
    def get_slug(self):
        ...

    @abstractmethod
    def boot(self, manager):
        """Attach hooks to ``manager``. Called once per registration."""

    def get_description(self):
        return ''

    def get_author(self):
        return ''

    def get_dependencies(self):
        """Slugs of plugins that must be enabled first"""
        return []

    def get_permissions(self):
        """List of dicts with ``name``, ``slug`` and optional ``description``"""
        return []

    def register(self):
        pass

    def install(self):
        pass

    def uninstall(self):
        pass

    def enable(self):
        pass

    def disable(self):
        pass

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.get_slug()} {self.get_version()}>"
