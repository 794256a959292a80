from slisp.reader.lexer import lex, tokenize
from slisp.reader.parser import TokenStream, parse, parse_all

__all__ = ["lex", "tokenize", "TokenStream", "parse", "parse_all"]
