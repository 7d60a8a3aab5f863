# Utilities Module
from .validators import validate_field, validate_form

__all__ = ["validate_field", "validate_form"]
