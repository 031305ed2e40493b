from ..models import FormatterConfig
from .base import ASTRule, FormattingContext, Transformation, reindent_line
from .braces import BraceIndentationRule

INDENTERS = {
    "class_body",
    "interface_body",
    "enum_body",
    "annotation_type_body",
    "constructor_body",
    "block",
    "switch_block",
    "array_initializer",
    "element_value_array_initializer",
    "module_body",
}

# Nodes whose inner lines belong to the literal or comment, not to the code layout
MULTILINE_NODES = {"block_comment", "string_literal", "text_block"}

SWITCH_LABEL_PARTS = {"switch_label", ":", ","}

# Parts of a statement that start a line at the statement's own depth
CLAUSES = {"catch_clause", "finally_clause", "else", "while"}

# Children that may precede the line a declaration really starts on
LEADING_NODES = {"modifiers", "annotation", "marker_annotation", "line_comment", "block_comment"}

# Control statements whose body may be a single statement instead of a block
BODY_FIELDS = {
    "if_statement": ("consequence", "alternative"),
    "while_statement": ("body",),
    "for_statement": ("body",),
    "enhanced_for_statement": ("body",),
    "do_statement": ("body",),
}

CONTINUATION_LEVELS = 2

# Containers whose children are statements at the container's own depth
TRANSPARENT = {"program", "enum_body_declarations"}


def _statement_row(node) -> int:
    for child in node.children:
        if child.type not in LEADING_NODES:
            return child.start_point[0]
    return node.start_point[0]


def _bare_bodies(node) -> set[tuple[int, str]]:
    bodies = set()
    for field in BODY_FIELDS.get(node.type, ()):
        body = node.child_by_field_name(field)
        if body is not None and body.type != "block":
            bodies.add((body.start_byte, body.type))
    return bodies


class IndentationRule(ASTRule):
    """AST-based indentation for Java with switch group handling.

    A line that starts inside a statement begun on an earlier line is a
    continuation and sits CONTINUATION_LEVELS deeper than the statement.
    Falls back to brace counting when the source does not parse cleanly so a
    file the grammar does not understand is still indented sensibly.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config
        self.fallback = BraceIndentationRule(config)

    @property
    def rule_id(self) -> str:
        return "F002"

    @property
    def name(self) -> str:
        return "indentation"

    def analyze(self, context: FormattingContext) -> list[Transformation]:
        if context.tree is None:
            return self.fallback.analyze(context)

        # Each row takes the depth of the first node that starts on it
        line_depths: dict[int, int] = {}
        # row -> (node type, row the node starts on)
        continuations: dict[int, tuple[str, int]] = {}

        def record(row: int, depth: int):
            line_depths.setdefault(row, depth)

        def traverse(node, depth: int, anchor: int | None = None, in_statement: bool = False):
            # anchor is the row the enclosing statement starts on, None when node is a statement
            start_row = node.start_point[0]
            end_row = node.end_point[0]

            is_statement = anchor is None
            if is_statement:
                anchor = _statement_row(node)
                row_depth = depth
            elif start_row > anchor and node.type not in CLAUSES:
                row_depth = depth + CONTINUATION_LEVELS
            else:
                row_depth = depth

            if node.type in INDENTERS:
                # A body of the statement itself ignores a wrapped header
                if in_statement:
                    base = depth
                else:
                    base = line_depths.get(start_row, row_depth)
                record(start_row, base)
                for child in node.children:
                    if child.type in ("{", "}"):
                        record(child.start_point[0], base)
                    else:
                        traverse(child, base + 1)
                return

            record(start_row, row_depth)

            if node.type in MULTILINE_NODES and end_row > start_row:
                for row in range(start_row + 1, end_row + 1):
                    continuations.setdefault(row, (node.type, start_row))

            if node.type in TRANSPARENT:
                for child in node.children:
                    traverse(child, depth)
                return

            if node.type == "switch_block_statement_group":
                for child in node.children:
                    if child.type in SWITCH_LABEL_PARTS:
                        traverse(child, depth, anchor, is_statement)
                    else:
                        traverse(child, depth + 1)
                return

            bodies = _bare_bodies(node)
            for child in node.children:
                if (child.start_byte, child.type) in bodies:
                    # else-if chains stay at the depth of the first if
                    traverse(child, depth if child.type == "if_statement" else depth + 1)
                else:
                    traverse(child, depth, anchor, is_statement)

        traverse(context.tree.root_node, 0)

        unit = self.config.indent_unit
        transformations = []
        for row, line in enumerate(context.lines):
            stripped = line.strip()
            if not stripped:
                continue
            if row in continuations:
                node_type, opened_on = continuations[row]
                if node_type == "block_comment" and stripped.startswith("*"):
                    indent = unit * line_depths.get(opened_on, 0) + " "
                    transformations.extend(reindent_line(context, row, indent))
                continue
            transformations.extend(reindent_line(context, row, unit * line_depths.get(row, 0)))
        return transformations
