from lexer import scan
from parser import parse
from interpreter import run
from errors import LangError

def run_source(source):
    """Scan, parse and run `source`, returning the printed lines."""
    return run(parse(scan(source)))

def execute(source):
    """
    Host-facing entry point: the joined output on success, or
    'Error: <message>' if any stage fails.
    """
    try:
        return "\n".join(run_source(source))
    except LangError as e:
        return f"Error: {e}"
