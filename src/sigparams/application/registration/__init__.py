"""Declaration requests for methods with signatures."""

from sigparams.application.registration.declaration import DECLARATION_OPTIONS, declaration_from

__all__ = ["DECLARATION_OPTIONS", "declaration_from"]
