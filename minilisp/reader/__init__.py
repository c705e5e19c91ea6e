from minilisp.reader.parser import Reader, read_from_string

__all__ = ["Reader", "read_from_string"]
