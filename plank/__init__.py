"""plank: pagination for SQLAlchemy queries and small validated string types."""
from plank.core.exceptions import ValidationError, ValidationErrors
from plank.utils.pagination import Paginator
from plank.validators import Email, Password, Phone

__version__ = "1.0.0"

__all__ = [
    "Email",
    "Paginator",
    "Password",
    "Phone",
    "ValidationError",
    "ValidationErrors",
]
