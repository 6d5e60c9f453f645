from . import vt100
from .args import ParseResult


def _section(title: str, count: int, color: bool) -> str:
    return f"{vt100.style(title, vt100.BOLD, vt100.WHITE, color=color)}: {count}"


def render(result: ParseResult, color: bool = False) -> str:
    """Renders a parse result as an indented, human readable listing."""
    lines: list[str] = []

    lines.append(_section("Arguments", result.argumentCount(), color))
    for i, arg in enumerate(result.arguments()):
        lines.append(vt100.indent(f"[{i}] : {arg}"))

    options = result.options()
    lines.append(_section("Options", len(options), color))
    for key, values in options.items():
        lines.append(vt100.indent(f"{vt100.style(key, vt100.CYAN, color=color)} : {len(values)}"))
        for value in values:
            lines.append(vt100.indent(value, 6))

    lines.append(_section("Flags", result.flagCount(), color))
    for flag in result.flags():
        lines.append(vt100.indent(vt100.style(flag, vt100.GREEN, color=color)))

    return "\n".join(lines)


def dump(result: ParseResult):
    print(render(result, vt100.isatty()))
