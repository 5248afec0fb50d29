from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from typing import List, Optional
import logging
import os

from lexer import Lexer
from parser import Parser
from pipeline import run_source
from errors import LangError, LangSyntaxError
import ast_nodes

logger = logging.getLogger(__name__)

app = FastAPI(title="MiniLang IDE", version="1.0.0")

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

# --- Data models ---
class CodeRequest(BaseModel):
    code: str

class RunResponse(BaseModel):
    success: bool
    output: List[str] = []
    text: str = ""
    error: Optional[str] = None
    kind: Optional[str] = None

# --- Helpers ---
AST_TYPES = (
    ast_nodes.Program, ast_nodes.VarDecl, ast_nodes.Print,
    ast_nodes.BinaryAdd, ast_nodes.Number, ast_nodes.Identifier,
)

def ast_to_dict(node):
    if not isinstance(node, AST_TYPES):
        return {"type": "Unknown", "value": str(node)}
    result = {"type": type(node).__name__}
    for key, value in node.__dict__.items():
        if isinstance(value, (int, str)):
            result[key] = value
        elif isinstance(value, (list, tuple)):
            result[key] = [ast_to_dict(v) for v in value]
        else:
            result[key] = ast_to_dict(value)
    return result

def error_kind(e):
    return "SyntaxError" if isinstance(e, LangSyntaxError) else "RuntimeError"

# --- API endpoints ---
@app.post("/api/run", response_model=RunResponse)
async def run_code(request: CodeRequest):
    try:
        output = run_source(request.code)
    except LangError as e:
        logger.info("Run failed: %s: %s", error_kind(e), e)
        return RunResponse(success=False, error=f"Error: {e}", kind=error_kind(e))
    return RunResponse(success=True, output=output, text="\n".join(output))

@app.post("/api/compile")
async def compile_code(request: CodeRequest):
    try:
        tokens = Lexer(request.code).tokenize()
        program = Parser(tokens).parse_program()
    except LangSyntaxError as e:
        logger.info("Compile failed: %s", e)
        return {"success": False, "errors": [str(e)]}
    token_list = [{"type": t.type.name, "value": t.value, "line": t.line, "column": t.column} for t in tokens]
    return {"success": True, "tokens": token_list, "ast": ast_to_dict(program)}

@app.get("/api/examples")
async def get_examples():
    return {
        "sum": {"name": "Sum", "code": "let a = 2;\nlet b = 3;\nlet c = a + b;\nprint(c);"},
        "chain": {"name": "Running total", "code": "let x = 1;\nlet y = x + 1;\nlet z = y + 1;\nprint(x);\nprint(y);\nprint(z);"},
        "literal": {"name": "Print a literal", "code": "print(40 + 2);"},
    }

# --- App setup ---
if not os.path.exists(STATIC_DIR): os.makedirs(STATIC_DIR)
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
