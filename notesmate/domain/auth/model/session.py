from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.shared.model.value import ValueObject


class IssuedToken(ValueObject):
    """A freshly signed token together with the claims it carries."""

    token: str
    claims: Claims
    expires_in: int  # seconds
