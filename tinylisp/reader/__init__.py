from tinylisp.reader.lexer import Token, TokenType, lex, tokenize
from tinylisp.reader.parser import TokenStream, read, read_one

__all__ = ["Token", "TokenType", "lex", "tokenize", "TokenStream", "read", "read_one"]
