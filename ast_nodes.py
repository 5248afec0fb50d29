from dataclasses import dataclass
from typing import Tuple, Union

@dataclass(frozen=True)
class Number:
    value: int

@dataclass(frozen=True)
class Identifier:
    name: str

@dataclass(frozen=True)
class BinaryAdd:
    left: 'Expression'
    right: 'Expression'

Expression = Union[Number, Identifier, BinaryAdd]

@dataclass(frozen=True)
class VarDecl:
    name: str
    expr: Expression

@dataclass(frozen=True)
class Print:
    expr: Expression

Statement = Union[VarDecl, Print]

@dataclass(frozen=True)
class Program:
    body: Tuple[Statement, ...]
