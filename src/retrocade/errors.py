class RetrocadeError(Exception):
    """Base class for errors raised while building or driving a game."""


class UnknownGameError(RetrocadeError, KeyError):
    def __init__(self, slug: str):
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"No game registered under '{self.slug}'"


class BoardLayoutError(RetrocadeError, ValueError):
    """A board template is malformed (ragged rows, missing markers)."""


class GameLifecycleError(RetrocadeError, RuntimeError):
    """A lifecycle call arrived in a state that cannot honour it."""
