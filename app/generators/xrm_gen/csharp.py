"""C# source emitter for the class model (Jinja2-free)."""
from app.generators.xrm_gen.class_model import CodeClass, CodeField, CodeNamespace


HEADER = [
    "//------------------------------------------------------------------------------",
    "// <auto-generated>",
    "//     This code was generated by xrm2ts.",
    "//",
    "//     Changes to this file may cause incorrect behavior and will be lost if",
    "//     the code is regenerated.",
    "// </auto-generated>",
    "//------------------------------------------------------------------------------",
]

INDENT = "    "

CSHARP_KEYWORDS = frozenset("""
abstract as base bool break byte case catch char checked class const continue
decimal default delegate do double else enum event explicit extern false finally
fixed float for foreach goto if implicit in int interface internal is lock long
namespace new null object operator out override params private protected public
readonly ref return sbyte sealed short sizeof stackalloc static string struct
switch this throw true try typeof uint ulong unchecked unsafe ushort using
virtual void volatile while
""".split())


def _identifier(name: str) -> str:
    # keywords are verbatim identifiers in C#
    if name in CSHARP_KEYWORDS:
        return "@" + name
    return name


def _string_literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _emit_field(code_field: CodeField) -> str:
    if code_field.is_const:
        return (
            f"public const {code_field.clr_type} {_identifier(code_field.name)} = "
            f"{_string_literal(code_field.init_value or '')};"
        )
    return f"public {code_field.clr_type} {_identifier(code_field.name)};"


def _emit_class(code_class: CodeClass) -> list:
    lines = [
        f"public class {_identifier(code_class.name)}",
        "{",
    ]
    for code_field in code_class.fields:
        lines.append(INDENT + _emit_field(code_field))
    lines.append("}")
    return lines


def emit_namespace(namespace: CodeNamespace) -> str:
    """Serialize a namespace to C# source with C-style bracing."""
    lines = HEADER + [
        "",
        f"namespace {_identifier(namespace.name)}",
        "{",
    ]
    for index, code_class in enumerate(namespace.classes):
        if index:
            lines.append("")
        lines.extend(INDENT + line for line in _emit_class(code_class))
    lines.append("}")
    return "\n".join(lines) + "\n"
