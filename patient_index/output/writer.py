"""Patient Index — Серіалізація дерев у JSON"""
import json
from typing import Any, TextIO


def dumps_tree(tree: Any, indent: int = 2) -> str:
    return json.dumps(tree, indent=indent, ensure_ascii=False) + "\n"


def write_json(tree: Any, sink: TextIO, indent: int = 2) -> None:
    sink.write(dumps_tree(tree, indent=indent))
