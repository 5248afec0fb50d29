from ast_nodes import Number, Identifier, BinaryAdd, VarDecl, Print
from errors import LangRuntimeError

class Interpreter:
    """
    Tree-walking evaluator for a parsed Program.

    Every call to run() starts from an empty environment, so the same
    interpreter (or Program) can be run repeatedly with identical output.
    """
    def __init__(self, program):
        self.program = program
        self.variables = {}

    def _get_variable(self, name):
        if name not in self.variables:
            raise LangRuntimeError(f"Undeclared variable '{name}'")
        return self.variables[name]

    def _evaluate_expr(self, expr):
        if isinstance(expr, Number):
            return expr.value
        elif isinstance(expr, Identifier):
            return self._get_variable(expr.name)
        elif isinstance(expr, BinaryAdd):
            left_val = self._evaluate_expr(expr.left)
            right_val = self._evaluate_expr(expr.right)
            return left_val + right_val
        else:
            raise LangRuntimeError(f"Unknown expression type '{type(expr).__name__}'")

    def run(self):
        self.variables = {}
        output = []

        for stmt in self.program.body:
            if isinstance(stmt, VarDecl):
                # name checked before the initializer; the binding itself comes after it
                if stmt.name in self.variables:
                    raise LangRuntimeError(f"Variable '{stmt.name}' already declared")
                self.variables[stmt.name] = self._evaluate_expr(stmt.expr)

            elif isinstance(stmt, Print):
                output.append(str(self._evaluate_expr(stmt.expr)))

            else:
                raise LangRuntimeError(f"Unknown statement type '{type(stmt).__name__}'")

        return output

def run(program):
    return Interpreter(program).run()
