from dial.reader.parser import lex, read, read_str, TokenStream

__all__ = ["lex", "read", "read_str", "TokenStream"]
