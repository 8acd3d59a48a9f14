from dishka import Provider as DishkaProvider

from notesmate.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all NotesMate DI providers.

    Defaults to ``Scope.UOW``: most dependencies live for one request.
    """

    scope = Scope.UOW
