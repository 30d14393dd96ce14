"""
Import declaration extraction.

This module finds ES module `import` declarations in JavaScript, TypeScript
and Vue single-file component sources and converts them into ImportStatement
objects, recording where each declaration and its module specifier sit in the
text so fixes can be applied in place.

Extraction is pattern based rather than a full JavaScript parse: declarations
must start a line, dynamic `import()` calls and `export ... from` re-exports
are not collected, and declarations inside block comments are skipped.
"""

from __future__ import annotations

import re

from .types import ImportBinding, ImportStatement, ParsedImport

# Quoted strings (string-literal import names) and comments may appear inside
# the clause. A bare `=` never does, which keeps `import x = require("y")` from
# running on into the next declaration.
_CLAUSE = r"""(?://[^\n]*|/\*[\s\S]*?\*/|'[^'\n]*'|"[^"\n]*"|[^'";=/]|/(?![/*]))*?"""

IMPORT_DECLARATION = re.compile(
    rf"""
    ^(?P<indent>[ \t]*)
    import
    (?:
        \s*(?P<bare_quote>['"])(?P<bare_source>[^'"\n]*)(?P=bare_quote)
      |
        \s+(?P<type>type\s+)?(?P<clause>{_CLAUSE})\s*\bfrom\s*
        (?P<quote>['"])(?P<source>[^'"\n]*)(?P=quote)
    )
    (?:[ \t]*;)?
    """,
    re.MULTILINE | re.VERBOSE,
)

BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
LINE_COMMENT = re.compile(r"//[^\n]*")

_TYPE_MARKER = re.compile(r"^type\s+(?!as\b)")
_ALIAS_SEPARATOR = re.compile(r"\s+as\s+")
_NAMESPACE = re.compile(r"^\*\s*as\s+(?P<name>[\w$]+)$")


def strip_comments(clause: str) -> str:
    """Blank out `//` and `/* */` comments in an import clause."""
    return LINE_COMMENT.sub(" ", BLOCK_COMMENT.sub(" ", clause))


def _unquote(name: str) -> str:
    if len(name) >= 2 and name[0] in "'\"" and name[-1] == name[0]:
        return name[1:-1]
    return name


def parse_named_binding(item: str) -> ImportBinding:
    """
    Parse one entry of a brace list, e.g. "Button", "Button as Btn" or "type Props".
    """
    is_type_only = False
    marker = _TYPE_MARKER.match(item)
    if marker:
        is_type_only = True
        item = item[marker.end() :]

    parts = _ALIAS_SEPARATOR.split(item, maxsplit=1)
    imported_name = _unquote(parts[0].strip())
    local_name = parts[1].strip() if len(parts) == 2 else imported_name
    return ImportBinding.named(imported_name, local_name, is_type_only)


def parse_import_clause(clause: str) -> tuple[ImportBinding, ...]:
    """
    Parse the part of a declaration between `import` and `from`.

    Args:
        clause: Clause text such as "Foo, { Bar as Baz }" or "* as NS"

    Returns:
        Bindings in source order
    """
    bindings: list[ImportBinding] = []
    clause = strip_comments(clause)

    brace_start = clause.find("{")
    brace_end = clause.rfind("}")
    if brace_start != -1 and brace_end > brace_start:
        head = clause[:brace_start]
        named = clause[brace_start + 1 : brace_end]
    else:
        head = clause
        named = ""

    for part in head.split(","):
        part = part.strip()
        if not part:
            continue
        namespace = _NAMESPACE.match(part)
        if namespace:
            bindings.append(ImportBinding.namespace(namespace.group("name")))
        else:
            bindings.append(ImportBinding.default(part))

    for item in named.split(","):
        item = item.strip()
        if item:
            bindings.append(parse_named_binding(item))

    return tuple(bindings)


def extract_imports(text: str) -> list[ParsedImport]:
    """
    Extract every import declaration from source text.

    Args:
        text: Full contents of a JS/TS/Vue file

    Returns:
        ParsedImport objects in the order they appear in the text
    """
    comments = [(m.start(), m.end()) for m in BLOCK_COMMENT.finditer(text)]
    imports: list[ParsedImport] = []

    for match in IMPORT_DECLARATION.finditer(text):
        start = match.end("indent")
        if any(c_start <= start < c_end for c_start, c_end in comments):
            continue

        if match.group("bare_quote") is not None:
            statement = ImportStatement(source=match.group("bare_source"))
            quote_group, source_group = "bare_quote", "bare_source"
        else:
            clause = strip_comments(match.group("clause"))
            is_type_only = match.group("type") is not None
            if is_type_only and not clause.strip():
                # `import type from "x"` binds a default export named "type"
                bindings = (ImportBinding.default("type"),)
                is_type_only = False
            else:
                bindings = parse_import_clause(clause)
            statement = ImportStatement(
                source=match.group("source"),
                bindings=bindings,
                is_type_only=is_type_only,
            )
            quote_group, source_group = "quote", "source"

        imports.append(
            ParsedImport(
                statement=statement,
                text=text[start : match.end()],
                start=start,
                end=match.end(),
                source_start=match.start(quote_group),
                source_end=match.end(source_group) + 1,
                quote=match.group(quote_group),
                line_number=text.count("\n", 0, start) + 1,
                indent=match.group("indent"),
            )
        )

    return imports
