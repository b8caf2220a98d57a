"""Errores de la aplicación con su representación JSON."""

from typing import Any, Dict, Optional


class LookupAppError(Exception):
    """
    Base de los errores propios.

    Attributes:
        code: Código de error (p.ej. "SPREADSHEET_FORMAT")
        message: Mensaje legible
        status_code: Código HTTP
        details: Contexto adicional
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            'error': self.message,
            'code': self.code,
            'details': self.details,
        }


class SpreadsheetFormatError(LookupAppError):
    """El archivo no es una hoja de cálculo legible (400)."""

    def __init__(self, filename: str, reason: str):
        super().__init__(
            code='SPREADSHEET_FORMAT',
            message=f'No se pudo leer la hoja de cálculo: {reason}',
            status_code=400,
            details={'filename': filename}
        )


class ProfileNotSupportedError(LookupAppError):
    """La operación no existe para el perfil configurado (404)."""

    def __init__(self, operation: str, profile: str):
        super().__init__(
            code='PROFILE_NOT_SUPPORTED',
            message=f'{operation} no está disponible en el perfil {profile}',
            status_code=404,
            details={'operation': operation, 'profile': profile}
        )
