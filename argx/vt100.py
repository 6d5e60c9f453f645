import sys


RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
WHITE = "\033[37m"
YELLOW = "\033[33m"

BOLD = "\033[1m"
RESET = "\033[0m"


def isatty(stream=None) -> bool:
    stream = stream or sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def indent(text: str, indent: int = 3) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def style(text: str, *codes: str, color: bool = True) -> str:
    if not color or not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)
