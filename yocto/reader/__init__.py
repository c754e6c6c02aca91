from yocto.reader.parser import lex, parse, parse_all, TokenStream

__all__ = ["lex", "parse", "parse_all", "TokenStream"]
