class BadgeTokenError(Exception):
    """Cualquier token que no produce una insignia válida."""


class DecodeError(BadgeTokenError): ...


class IntegrityError(BadgeTokenError): ...


class ValidationError(Exception):
    """Datos de creación inválidos. El mensaje se puede mostrar al usuario."""
