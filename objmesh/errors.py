# objmesh/errors.py
"""
Иерархия исключений загрузчика.

Все ошибки фатальны для всего вызова `load_obj` – частичного результата нет.
`str(exc)` – готовое сообщение для показа пользователю.
"""

from __future__ import annotations


class ObjError(Exception):
    """Базовое исключение пакета."""


# ---------------------------------------------------------------------
# Синтаксис
# ---------------------------------------------------------------------
class ParseError(ObjError):
    """Строка не соответствует грамматике OBJ."""

    def __init__(self, line: int, text: str, expected, column: int = 0):
        self.line = line
        self.text = text
        self.expected = list(expected)
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        prefix = f"line {self.line}: "
        caret = " " * (len(prefix) + self.column) + "^"
        return (
            f"{prefix}{self.text}\n"
            f"{caret}\n"
            f"expected one of: {', '.join(self.expected)}"
        )


class UnsupportedFaceError(ParseError):
    """Грань без ссылок на нормали (`p` или `p/t`)."""

    def _format(self) -> str:
        return (
            super()._format()
            + "\nmodels with no precalculated vertex normals are not supported"
        )


# ---------------------------------------------------------------------
# Сборка
# ---------------------------------------------------------------------
class AssemblyError(ObjError):
    """Синтаксически верный файл, который нельзя собрать в меши."""


class DanglingReferenceError(AssemblyError):
    """Угол грани ссылается на ещё не объявленную (или нулевую) вершину."""

    def __init__(self, corner, kind: str, index: int, available: int, line: int = 0):
        self.corner = corner
        self.kind = kind
        self.index = index
        self.available = available
        self.line = line
        where = f"line {line}: " if line else ""
        super().__init__(
            f"{where}face corner {corner} references {kind} #{index}, "
            f"but only {available} {kind}(s) are declared so far"
        )


class InconsistentFaceShapeError(AssemblyError):
    """В одном (group, material) встретились грани разных форматов вершин."""

    def __init__(self, expected, found, group: str, material: str, line: int = 0):
        self.expected = expected
        self.found = found
        self.group = group
        self.material = material
        self.line = line
        where = f"line {line}: " if line else ""
        super().__init__(
            f"{where}mesh {group!r}/{material!r} mixes vertex formats: "
            f"started as {expected.label}, got {found.label}"
        )
