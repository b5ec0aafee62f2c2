from .field_mapping import FieldMapper

__all__ = ['FieldMapper']
