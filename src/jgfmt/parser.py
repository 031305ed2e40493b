from dataclasses import dataclass

import tree_sitter_java as tsjava
from tree_sitter import Language, Parser, Tree


@dataclass
class ParseResult:
    tree: Tree

    @property
    def has_errors(self) -> bool:
        return self.tree.root_node.has_error


class JavaParser:
    """Thin wrapper around the tree-sitter Java grammar."""

    def __init__(self):
        self.language = Language(tsjava.language())
        self.parser = Parser(self.language)

    def parse_string(self, source: str) -> ParseResult:
        return ParseResult(tree=self.parser.parse(source.encode("utf-8")))
