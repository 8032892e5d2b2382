#!/usr/bin/env python3
"""
AST node generator.

Build-time helper that writes the syntax tree module a Lox parser works
with. Each node type is described in a compact form:

    "Binary : Expr left, Token operator, Expr right"

and becomes a frozen dataclass with an `accept` method that calls back
into the matching `visit_*` method of a visitor (double dispatch).
Nothing in the scanner imports this module.
"""

import io
import os
import sys
from typing import List, Optional, TextIO, Tuple

EX_USAGE = 64

EXPR_TYPES = [
    "Binary   : Expr left, Token operator, Expr right",
    "Grouping : Expr expression",
    "Literal  : Any value",
    "Unary    : Token operator, Expr right",
]

Field = Tuple[str, str]


def parse_type_spec(spec: str) -> Tuple[str, List[Field]]:
    """
    Split a node description into its class name and (type, name) fields.

    Raises:
        ValueError: If the description is malformed
    """
    if spec.count(":") != 1:
        raise ValueError(f"Expected 'Name : Type field, ...', got {spec!r}")

    class_part, field_part = spec.split(":")
    class_name = class_part.strip()
    if not class_name.isidentifier():
        raise ValueError(f"Invalid node name {class_name!r}")

    fields: List[Field] = []
    for raw_field in field_part.split(","):
        parts = raw_field.split()
        if len(parts) != 2 or not all(part.isidentifier() for part in parts):
            raise ValueError(f"Invalid field {raw_field.strip()!r} in {class_name}")
        fields.append((parts[0], parts[1]))

    return class_name, fields


def _method_name(class_name: str, base_name: str) -> str:
    return f"visit_{class_name.lower()}_{base_name.lower()}"


def _annotation(field_type: str, base_name: str) -> str:
    # Forward reference for the base class, it is defined in the same module
    return f"'{field_type}'" if field_type == base_name else field_type


def define_visitor(writer: TextIO, base_name: str, types: List[Tuple[str, List[Field]]]):
    writer.write(f"class {base_name}Visitor(ABC):\n")
    writer.write(f'    """Visitor interface, one method per {base_name} node type."""\n')
    for class_name, _ in types:
        writer.write("\n")
        writer.write("    @abstractmethod\n")
        writer.write(f"    def {_method_name(class_name, base_name)}"
                     f"(self, {base_name.lower()}: '{class_name}') -> Any:\n")
        writer.write("        pass\n")
    writer.write("\n\n")


def define_type(writer: TextIO, base_name: str, class_name: str, fields: List[Field]):
    writer.write("@dataclass(frozen=True)\n")
    writer.write(f"class {class_name}({base_name}):\n")
    for field_type, field_name in fields:
        writer.write(f"    {field_name}: {_annotation(field_type, base_name)}\n")
    writer.write("\n")
    writer.write(f"    def accept(self, visitor: {base_name}Visitor) -> Any:\n")
    writer.write(f"        return visitor.{_method_name(class_name, base_name)}(self)\n")
    writer.write("\n\n")


def render_ast(base_name: str, types: List[str]) -> str:
    """Return the source of the node module for `types`."""
    parsed = [parse_type_spec(spec) for spec in types]

    lines = [
        f'"""{base_name} syntax tree nodes. Generated by generate_ast.py, do not edit."""',
        "",
        "from abc import ABC, abstractmethod",
        "from dataclasses import dataclass",
        "from typing import Any",
        "",
        "from pylox.lexer.tokens import Token",
        "",
        "",
    ]

    writer = io.StringIO()
    writer.write("\n".join(lines) + "\n")

    define_visitor(writer, base_name, parsed)

    writer.write(f"class {base_name}(ABC):\n")
    writer.write(f'    """Base class for all {base_name} nodes."""\n')
    writer.write("\n")
    writer.write("    @abstractmethod\n")
    writer.write(f"    def accept(self, visitor: {base_name}Visitor) -> Any:\n")
    writer.write("        pass\n")
    writer.write("\n\n")

    for class_name, fields in parsed:
        define_type(writer, base_name, class_name, fields)

    return writer.getvalue().rstrip("\n") + "\n"


def define_ast(output_dir: str, base_name: str, types: List[str]) -> str:
    """
    Write `<base_name>.py` (lower-cased) into `output_dir`.

    Returns:
        Path of the generated file
    """
    source = render_ast(base_name, types)
    path = os.path.join(output_dir, f"{base_name.lower()}.py")
    with open(path, 'w', encoding='utf-8') as f:
        f.write(source)
    return path


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: generate_ast <output_dir>", file=sys.stderr)
        return EX_USAGE

    path = define_ast(args[0], "Expr", EXPR_TYPES)
    print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
