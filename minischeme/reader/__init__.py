from minischeme.reader.parser import ReadResult, atom, parse, parse_all, read_from_tokens, tokenize

__all__ = ["ReadResult", "atom", "parse", "parse_all", "read_from_tokens", "tokenize"]
