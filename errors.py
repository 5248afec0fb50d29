class LangError(Exception):
    def __init__(self, message, line=None, column=None):
        if line is not None:
            message = f"Line {line}:{column} - {message}"
        super().__init__(message)
        self.line = line
        self.column = column

class LangSyntaxError(LangError, SyntaxError):
    pass

class LangRuntimeError(LangError, RuntimeError):
    pass
