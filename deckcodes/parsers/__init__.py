from deckcodes.parsers.decklist import format_decklist, parse_decklist

__all__ = [
    "format_decklist",
    "parse_decklist",
]
