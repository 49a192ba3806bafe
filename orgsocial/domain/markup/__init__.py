"""Post body markup: inline tokens and fenced blocks."""

from orgsocial.domain.markup.block_parser import apply_collapse, parse_blocks, split_lines
from orgsocial.domain.markup.tokenizer import Tokenizer, tokenize

__all__ = [
    "Tokenizer",
    "apply_collapse",
    "parse_blocks",
    "split_lines",
    "tokenize",
]
