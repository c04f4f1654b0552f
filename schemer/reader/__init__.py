from schemer.reader.parser import Reader, read_expr

__all__ = ["Reader", "read_expr"]
